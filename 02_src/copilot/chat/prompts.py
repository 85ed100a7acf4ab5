"""Fixed system instruction and canned workflows."""

from dataclasses import dataclass

SYSTEM_INSTRUCTION = """Você é o "Strategic Sales Copilot" Sênior. Sua autoridade vem da PRECISÃO matemática.

REGRAS:
1. Respostas concisas e diretas.
2. Escreva primeiro a análise em texto e termine a resposta com EXATAMENTE UM bloco JSON.
3. Se ainda faltarem dados, faça perguntas de esclarecimento e omita o bloco JSON.

FORMATO DO JSON:
```json
{
  "summary": "Resumo executivo curto.",
  "metrics": [
    {"label": "KPI", "value": "R$ ou %", "change": number, "isPositive": boolean}
  ],
  "charts": [
    {
      "type": "bar|line|pie|funnel",
      "title": "Título",
      "data": [{"name": "Label", "valor": number}],
      "keys": ["valor"]
    }
  ],
  "insights": [
    {"type": "critical|positive|neutral", "text": "Insight."}
  ],
  "recommendations": ["Ação"]
}
```"""

WELCOME_MESSAGE = (
    "Olá! Sou seu Copiloto de Estratégia. Envie seus dados de vendas ou peça um "
    "diagnóstico de mercado."
)

ATTACHMENT_ONLY_PROMPT = "Analise este arquivo: {name}"


@dataclass(frozen=True)
class Workflow:
    id: str
    name: str
    description: str
    prompt: str


WORKFLOWS: dict[str, Workflow] = {
    workflow.id: workflow
    for workflow in (
        Workflow(
            id="monthly-sales",
            name="Análise Mensal de Vendas",
            description="Relatório detalhado sobre performance do mês corrente vs anterior.",
            prompt=(
                "Inicie a Análise Mensal de Vendas. Compare este mês com o anterior. "
                "(Aguardando dados ou perguntando sobre performance geral)"
            ),
        ),
        Workflow(
            id="channel-perf",
            name="Performance por Canal",
            description="Identifique gargalos e melhores taxas de conversão por parceiro.",
            prompt="Execute a Análise de Performance por Canal. Onde estão as melhores conversões?",
        ),
        Workflow(
            id="churn-diagnosis",
            name="Diagnóstico de Churn",
            description="Análise de queda de retenção e hipóteses estratégicas.",
            prompt="Inicie Diagnóstico de Churn. Identifique os pontos de fricção no funil.",
        ),
        Workflow(
            id="exec-report",
            name="Relatório Executivo",
            description="Transforme dados em um resumo para a diretoria.",
            prompt="Gere um Relatório Executivo consolidado com os principais KPIs estratégicos.",
        ),
    )
}
