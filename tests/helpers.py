"""
Shared sample data for the test suite.
"""

import json
from pathlib import Path

SAMPLE_DATASET = {
    "button": {
        "title": "Button",
        "description": "Clickable control",
        "props": {"label": {"type": "string"}, "icon": {"type": "string"}},
        "examples": ["<Button label=\"Save\" />"],
        "cssVariables": {"--p-button-padding": "0.5rem"},
        "emits": ["click"],
        "deprecated": None,
        "since": "1.0",
    },
    "datatable": {
        "title": "DataTable",
        "description": "Displays data in tabular format",
        "props": {"value": {}, "paginator": {}, "rows": {}},
        "examples": [],
    },
    "Dialog": {
        "title": "Dialog",
        "description": "Container to display content in an overlay window",
    },
    "divider": {},
    "_tokens": {
        "primary.color": "#007bff",
        "surface.ground": "#f8f9fa",
        "button.padding": "0.5rem 1rem",
    },
}


def write_dataset(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path
