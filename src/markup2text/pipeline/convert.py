"""Document conversion step.

Loads XML documents, picks the node policy by root element, extracts and
normalizes the token sequence for one output variant and writes plain text.
"""

import time
from pathlib import Path
from typing import Any

from lxml import etree  # type: ignore

from ..adapters import UnsupportedDocumentError, policy_for_root
from ..core import config
from ..core.config import Settings
from ..core.logging import log
from ..extraction import extract
from ..normalization import normalize
from ..rendering import UnrenderableTokenError, filter_tokens, render
from ..tokens import Conversion, Token
from ..tree import XmlNode, load_document

CONVERSIONS = {
    "human": Conversion.HUMAN,
    "tools": Conversion.TOOLS,
}

# Failures that abort a single document but not a directory run
DOCUMENT_ERRORS = (etree.XMLSyntaxError, UnsupportedDocumentError, UnrenderableTokenError)


def parse_conversion(name: str) -> Conversion:
    """Map a conversion name ("human" or "tools") to its flag."""
    try:
        return CONVERSIONS[name.lower()]
    except KeyError:
        raise ValueError(f"Unsupported conversion type: {name}") from None


def tokens_for_document(
    root: XmlNode | None,
    conversion: Conversion,
    settings: Settings | None = None,
    normalized: bool = True,
    policy_root: XmlNode | None = None,
) -> list[Token]:
    """Token sequence of the tree below ``root`` for one output variant.

    ``policy_root`` selects the policy when ``root`` is only a part of a
    document (defaults to ``root``).
    """
    if root is None:
        return []

    policy = policy_for_root(policy_root or root, settings or config.SETTINGS)
    tokens = filter_tokens(extract(root, policy), conversion)
    if normalized:
        tokens = normalize(tokens)
    return tokens


def convert_tree(
    root: XmlNode | None,
    conversion: Conversion,
    settings: Settings | None = None,
    policy_root: XmlNode | None = None,
) -> str:
    return render(tokens_for_document(root, conversion, settings, policy_root=policy_root))


def extract_text(file_path: Path, conversion: Conversion, settings: Settings | None = None) -> str:
    """Convert one XML file to plain text."""
    settings = settings or config.SETTINGS
    root = load_document(file_path, recover=settings.XML_RECOVER)
    return convert_tree(root, conversion, settings)


def write_text(text: str, output_file: Path, settings: Settings | None = None) -> None:
    settings = settings or config.SETTINGS
    try:
        output_file.write_text(text, encoding=settings.OUTPUT_ENCODING)
    except OSError as e:
        log.error("convert.write.error", file=str(output_file), error=str(e))
        raise


def convert_file(
    file_path: Path,
    output_dir: Path,
    conversion: Conversion,
    settings: Settings | None = None,
) -> Path:
    """Convert one file into ``output_dir`` and return the output path."""
    settings = settings or config.SETTINGS
    output_file = output_dir / f"{file_path.name}{settings.OUTPUT_SUFFIX}"
    write_text(extract_text(file_path, conversion, settings), output_file, settings)
    return output_file


def convert_directory(
    input_dir: str | Path,
    output_dir: str | Path,
    conversion: Conversion,
    settings: Settings | None = None,
) -> dict[str, Any]:
    """Convert every file directly inside ``input_dir``.

    A document that cannot be converted is logged and counted; the others
    are still converted. I/O errors abort the run.
    """
    settings = settings or config.SETTINGS
    input_path = Path(input_dir)
    output_path = Path(output_dir)
    if not input_path.is_dir():
        raise ValueError(f"Input directory does not exist: {input_dir}")
    output_path.mkdir(parents=True, exist_ok=True)

    started = time.monotonic()
    log.info(
        "convert.start",
        input_dir=str(input_path),
        output_dir=str(output_path),
        conversion=conversion.name,
    )

    files = sorted(p for p in input_path.iterdir() if p.is_file())
    converted = 0
    failures: list[dict[str, str]] = []

    for file_path in files:
        try:
            output_file = convert_file(file_path, output_path, conversion, settings)
        except DOCUMENT_ERRORS as e:
            log.error(
                "convert.document.error",
                file=file_path.name,
                error_type=type(e).__name__,
                error=str(e),
            )
            failures.append({"file": file_path.name, "error": str(e)})
            continue

        converted += 1
        log.debug("convert.document.done", file=file_path.name, output=output_file.name)

    metrics: dict[str, Any] = {
        "files": len(files),
        "converted": converted,
        "failed": len(failures),
        "failures": failures,
        "elapsed_ms": int((time.monotonic() - started) * 1000),
    }
    log.info("convert.done", **{k: v for k, v in metrics.items() if k != "failures"})
    return metrics
