from __future__ import annotations

import json

from .models import FileDetails

SECTION_RULE = "=" * 60


def render_text(details: FileDetails, root: str, *, include_contents: bool = True) -> str:
    output = [f"[ROOT] {root}"]
    if details.structure:
        output.append(details.structure.rstrip("\n"))

    if include_contents and details.contents:
        output.append("\n" + SECTION_RULE + "\nFILE CONTENTS:\n")
        for rel, content in details.contents.items():
            output.append(f"\n--- {rel} ---\n")
            output.append(content)

    return "\n".join(output)


def render_json(details: FileDetails) -> str:
    return json.dumps(details.model_dump(), indent=2, ensure_ascii=False)


__all__ = ["render_json", "render_text"]
