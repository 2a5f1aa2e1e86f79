"""Entry-point for the document to clean HTML pipeline."""
from __future__ import annotations

import argparse
import dataclasses
from pathlib import Path
from typing import List, Optional, Sequence

from richdoc_renderer.delivery.mailer import DirectoryDelivery, SmtpMailer, build_message
from richdoc_renderer.model.document_model import ConversionResult
from richdoc_renderer.model.errors import ConversionError
from richdoc_renderer.parser.document_loader import DocumentLoader
from richdoc_renderer.renderer.html_renderer import HtmlRenderer
from richdoc_renderer.utils.config import RendererSettings
from richdoc_renderer.utils.debug import DebugDumper
from richdoc_renderer.utils.logger import get_logger

LOGGER = get_logger(__name__)


def convert_file(document_path: Path, settings: Optional[RendererSettings] = None) -> ConversionResult:
    """Load a JSON document description and convert it into clean HTML."""
    document = DocumentLoader.load(document_path)
    return HtmlRenderer(settings).render(document)


def deliver(result: ConversionResult, settings: RendererSettings, output_dir: Optional[Path] = None) -> List[Path]:
    """Mail the result when a recipient is configured, otherwise write it to disk."""
    if settings.recipient:
        message = build_message(result, settings.recipient, settings.sender)
        SmtpMailer(settings.smtp_host, settings.smtp_port).send(message)
        return []
    if output_dir is None:
        raise ValueError("Either a recipient or an output directory is required")
    return DirectoryDelivery(output_dir).deliver(result)


def main(document_file: str, output_dir: Optional[str] = None, settings: Optional[RendererSettings] = None,
         debug: bool = False) -> ConversionResult:
    """Run the document → HTML → delivery pipeline."""
    document_path = Path(document_file).resolve()
    if not document_path.exists():
        raise FileNotFoundError(f"Document file not found: {document_path}")

    settings = settings or RendererSettings.from_env()
    LOGGER.info("Converting %s", document_path.name)
    result = convert_file(document_path, settings)

    output_path = Path(output_dir).resolve() if output_dir else document_path.with_suffix("")
    deliver(result, settings, output_path)

    if debug:
        DebugDumper(output_path / "debug").dump(result)
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert a rich-text document description into clean HTML")
    parser.add_argument("document_file", help="Path to the input JSON document description")
    parser.add_argument("--output", help="Directory to write the HTML and images into")
    parser.add_argument("--email", help="Mail the result to this address instead of writing files")
    parser.add_argument("--sender", help="From address for mailed results")
    parser.add_argument("--asset-base-url", help="URL prefix for <img> sources")
    parser.add_argument("--debug", action="store_true", help="Write a conversion manifest next to the output")
    return parser


def cli(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = RendererSettings.from_env()
    overrides = {
        "recipient": args.email,
        "sender": args.sender,
        "asset_base_url": args.asset_base_url,
    }
    settings = dataclasses.replace(settings, **{k: v for k, v in overrides.items() if v})

    try:
        main(args.document_file, args.output, settings=settings, debug=args.debug)
    except ConversionError as exc:
        LOGGER.error("Conversion failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(cli())
