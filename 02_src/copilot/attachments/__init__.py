"""Attachment encoding module."""

from .encoder import PendingAttachmentSlot, encode_attachment, encode_file, strip_data_uri

__all__ = ["PendingAttachmentSlot", "encode_attachment", "encode_file", "strip_data_uri"]
