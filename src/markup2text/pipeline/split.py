"""Splitting of TEI documents into their top-level divisions.

Every ``div`` directly below ``TEI/text/body`` becomes a sub-document of its
own, labelled with the text of its first ``head``.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..adapters import TeiPolicy, UnsupportedDocumentError
from ..core import config
from ..core.config import Settings
from ..core.logging import log
from ..tokens import Conversion
from ..tree import XmlNode, load_document
from .convert import convert_tree, write_text


@dataclass(frozen=True)
class TeiSplit:
    """A top-level division of a TEI document."""

    heading: str | None
    node: XmlNode


def split_tei(root: XmlNode) -> list[TeiSplit]:
    result: list[TeiSplit] = []
    for text in root.element_children("text"):
        for body in text.element_children("body"):
            for div in body.element_children("div"):
                result.append(TeiSplit(find_heading(div), div))
    return result


def find_heading(div: XmlNode) -> str | None:
    heads = div.element_children("head")
    if not heads:
        return None
    return heads[0].text_content().strip()


def split_file(
    file_path: str | Path,
    output_dir: str | Path,
    conversion: Conversion,
    settings: Settings | None = None,
) -> dict[str, Any]:
    """Convert each top-level division of a TEI file to its own text file.

    Writes ``<stem>_<NNN>.txt`` per division and a ``splits.json`` index.
    """
    settings = settings or config.SETTINGS
    source = Path(file_path)
    outdir = Path(output_dir)
    outdir.mkdir(parents=True, exist_ok=True)

    root = load_document(source, recover=settings.XML_RECOVER)
    if root.name != TeiPolicy.root_name:
        raise UnsupportedDocumentError(f"Not a TEI document: {source.name}")
    splits = split_tei(root)
    log.info("split.start", file=source.name, divisions=len(splits))

    index: list[dict[str, Any]] = []
    for number, split in enumerate(splits, start=1):
        output_file = outdir / f"{source.stem}_{number:03d}.txt"
        text = convert_tree(split.node, conversion, settings, policy_root=root)
        write_text(text, output_file, settings)
        index.append({"file": output_file.name, "heading": split.heading, "chars": len(text)})

    with open(outdir / "splits.json", "w", encoding="utf-8") as f:
        json.dump({"source": source.name, "splits": index}, f, ensure_ascii=False, indent=2)

    log.info("split.done", file=source.name, written=len(index))
    return {"source": source.name, "splits": index}
