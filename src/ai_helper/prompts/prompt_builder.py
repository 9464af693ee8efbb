from __future__ import annotations

import json
from typing import Any, List

TEST_PROMPT = 'Say "Hello! API connection successful!" and nothing else.'


def _render_data(data: Any) -> str:
    if isinstance(data, str):
        return data.strip()
    return json.dumps(data, indent=2, ensure_ascii=False)


def build_analysis_prompt(data: Any) -> str:
    lines: List[str] = []
    lines.append("Analyze the following data and provide insights:")
    lines.append("")
    lines.append(f"Data: {_render_data(data)}")
    lines.append("")
    lines.append("Please provide:")
    lines.append("1. Key patterns")
    lines.append("2. Potential issues")
    lines.append("3. Recommendations")

    return "\n".join(lines).strip()
