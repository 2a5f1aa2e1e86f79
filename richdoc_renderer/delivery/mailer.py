"""Hand a finished conversion to its recipient, by mail or onto disk."""
from __future__ import annotations

import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from pathlib import Path
from typing import List, Optional

from richdoc_renderer.model.document_model import ConversionResult
from richdoc_renderer.utils.filenames import clean_filename
from richdoc_renderer.utils.logger import get_logger

LOGGER = get_logger(__name__)

HTML_MIME_TYPE = "text/html"
MESSAGE_BODY = "Your converted, sanitized HTML is attached! :)"


@dataclass(slots=True)
class Attachment:
    """One file handed to the transport."""

    filename: str
    mime_type: str
    content: bytes


def html_filename(document_name: str) -> str:
    return clean_filename(document_name) + ".html"


def build_attachments(result: ConversionResult) -> List[Attachment]:
    """Images in extraction order, followed by the HTML document."""
    attachments = [
        Attachment(filename=image.filename, mime_type=image.mime_type, content=image.data)
        for image in result.images
    ]
    attachments.append(
        Attachment(
            filename=html_filename(result.document_name),
            mime_type=HTML_MIME_TYPE,
            content=result.html.encode("utf-8"),
        )
    )
    return attachments


def build_message(result: ConversionResult, recipient: str, sender: Optional[str] = None) -> EmailMessage:
    """Compose the delivery e-mail carrying every attachment."""
    message = EmailMessage()
    message["To"] = recipient
    message["From"] = sender or recipient
    message["Subject"] = html_filename(result.document_name)
    message.set_content(MESSAGE_BODY)

    for attachment in build_attachments(result):
        maintype, _, subtype = attachment.mime_type.partition("/")
        if maintype == "text":
            message.add_attachment(attachment.content.decode("utf-8"), subtype=subtype, filename=attachment.filename)
            continue
        message.add_attachment(
            attachment.content,
            maintype=maintype,
            subtype=subtype or "octet-stream",
            filename=attachment.filename,
        )
    return message


class SmtpMailer:
    """Sends messages through an SMTP relay."""

    def __init__(self, host: str, port: int) -> None:
        self.host = host
        self.port = port

    def send(self, message: EmailMessage) -> None:
        LOGGER.info("Sending %s to %s via %s:%d", message["Subject"], message["To"], self.host, self.port)
        with smtplib.SMTP(self.host, self.port) as smtp:
            smtp.send_message(message)


class DirectoryDelivery:
    """Writes the attachments of a conversion into a directory."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def deliver(self, result: ConversionResult) -> List[Path]:
        self.directory.mkdir(parents=True, exist_ok=True)
        written = []
        for attachment in build_attachments(result):
            target = self.directory / attachment.filename
            target.write_bytes(attachment.content)
            written.append(target)
        LOGGER.info("Wrote %d files into %s", len(written), self.directory)
        return written
