"""
Tool surface for agent integrations.

Exposes "generate slide" and "generate presentation" plus a few catalogue
lookups as named tools with JSON input schemas. `call_tool` is the
outermost error boundary: every failure is logged once and returned as a
structured error result instead of being raised.
"""

import json
import logging
from typing import Any, Callable, Dict, List, Optional

from .builder import SlideBuilder
from .errors import DeckBuilderError

logger = logging.getLogger(__name__)

DEFAULT_SLIDE_PATH = "./output/slide.pptx"
DEFAULT_PRESENTATION_PATH = "./output/presentation.pptx"

_ITEM_SCHEMA = {
    "type": "object",
    "properties": {
        "icon": {"type": "string", "description": "Unicode icon symbol"},
        "title": {"type": "string", "description": "Item title (max 30 chars)"},
        "detail": {"type": "string", "description": "Item detail text (max 60 chars)"},
    },
    "required": ["icon", "title"],
}

_CARD_SCHEMA = {
    "type": "object",
    "properties": {
        "title": {"type": "string", "description": "Card title (uppercase, max 25 chars)"},
        "type": {"type": "string", "enum": ["iconGrid", "pills", "journey"],
                 "description": "Content layout type"},
        "items": {"type": "array", "items": _ITEM_SCHEMA,
                  "description": "Content items (for iconGrid or pills type)"},
        "pills": {"type": "array", "items": {"type": "string"}, "maxItems": 3,
                  "description": "Pill labels (for pills type, max 3)"},
        "journey": {
            "type": "array", "minItems": 4, "maxItems": 4,
            "description": "Journey steps (for journey type, exactly 4)",
            "items": {
                "type": "object",
                "properties": {
                    "step": {"type": "string", "description": "Step number (e.g., '01')"},
                    "title": {"type": "string", "description": "Step title (1-2 words)"},
                    "label": {"type": "string", "description": "Step label/description"},
                },
                "required": ["step", "title"],
            },
        },
        "sparkline": {
            "type": "array", "maxItems": 3,
            "description": "Bottom metrics row (max 3)",
            "items": {
                "type": "object",
                "properties": {
                    "value": {"type": "string", "description": "Metric value or label"},
                    "label": {"type": "string", "description": "Metric description"},
                },
                "required": ["value", "label"],
            },
        },
    },
    "required": ["title", "type"],
}

_SLIDE_PROPERTIES = {
    "header": {
        "type": "object",
        "description": "Header section content",
        "properties": {
            "eyebrow": {"type": "string", "description": "Category/eyebrow text (uppercase, max 25 chars)"},
            "title": {"type": "string", "description": "Main slide title (max 50 chars)"},
            "subtitle": {"type": "string", "description": "Supporting subtitle (max 80 chars)"},
            "badge": {"type": "string", "description": "Badge text in top-right (max 30 chars)"},
        },
        "required": ["eyebrow", "title", "subtitle", "badge"],
    },
    "leftCard": dict(_CARD_SCHEMA, description="Left content card"),
    "rightCard": dict(_CARD_SCHEMA, description="Right content card (same structure as leftCard)"),
    "ask": {
        "type": "object",
        "description": "Call-to-action bar at bottom",
        "properties": {
            "icon": {"type": "string", "description": "Unicode icon symbol"},
            "title": {"type": "string", "description": "CTA title (max 25 chars)"},
            "text": {"type": "string", "description": "CTA description (max 100 chars)"},
            "cta": {"type": "string", "description": "Button text (max 15 chars)"},
        },
        "required": ["icon", "title", "text", "cta"],
    },
    "splitColumns": {
        "type": "boolean",
        "description": "Use equal 50/50 column split instead of default 55/45",
        "default": False,
    },
}

TOOLS: List[Dict[str, Any]] = [
    {
        "name": "generate_slide",
        "description": (
            "Generate a single PowerPoint slide: a header (eyebrow, title, subtitle, badge), "
            "two content cards (iconGrid, pills or journey, each with an optional sparkline) "
            "and a call-to-action bar. Canvas is 1280x720px on a 10x5.625in slide."
        ),
        "inputSchema": {
            "type": "object",
            "properties": dict(
                outputPath={"type": "string",
                            "description": f"Output file path for the .pptx file (default: {DEFAULT_SLIDE_PATH})"},
                **_SLIDE_PROPERTIES,
            ),
            "required": ["header", "leftCard", "rightCard", "ask"],
        },
    },
    {
        "name": "generate_presentation",
        "description": (
            "Generate a PowerPoint presentation with multiple slides. "
            "Each slide follows the same structure as generate_slide."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "outputPath": {"type": "string",
                               "description": f"Output file path (default: {DEFAULT_PRESENTATION_PATH})"},
                "title": {"type": "string", "description": "Presentation title (file properties)"},
                "author": {"type": "string", "description": "Presentation author (file properties)"},
                "slides": {
                    "type": "array",
                    "description": "Array of slide definitions",
                    "items": {
                        "type": "object",
                        "properties": _SLIDE_PROPERTIES,
                        "required": ["header", "leftCard", "rightCard", "ask"],
                    },
                },
            },
            "required": ["slides"],
        },
    },
    {
        "name": "list_templates",
        "description": "List available slide templates and content type options with examples.",
        "inputSchema": {"type": "object", "properties": {}},
    },
    {
        "name": "get_color_palette",
        "description": "Get the color palette used for slides.",
        "inputSchema": {"type": "object", "properties": {}},
    },
    {
        "name": "get_icons",
        "description": "Get recommended Unicode icons/symbols for use in slides.",
        "inputSchema": {"type": "object", "properties": {}},
    },
]

TEMPLATES = {
    "templates": [
        {
            "name": "Strategy Overview",
            "description": "High-level strategic priorities with icon grid and sparkline metrics",
            "leftCard": {"type": "iconGrid", "items": 3, "sparkline": True},
            "rightCard": {"type": "pills", "pills": 3, "items": 3},
        },
        {
            "name": "Process Journey",
            "description": "Step-by-step process flow with supporting details",
            "leftCard": {"type": "journey", "steps": 4, "sparkline": True},
            "rightCard": {"type": "iconGrid", "items": 3, "sparkline": True},
        },
        {
            "name": "Feature Comparison",
            "description": "Two icon grids comparing features or options",
            "leftCard": {"type": "iconGrid", "items": 3, "sparkline": True},
            "rightCard": {"type": "iconGrid", "items": 3, "sparkline": True},
        },
    ],
    "contentTypes": {
        "iconGrid": {
            "description": "Vertical list of items with icon, title, and detail text",
            "maxItems": 4,
            "example": {"icon": "◎", "title": "Feature Name",
                        "detail": "Brief description of the feature or capability."},
        },
        "pills": {
            "description": "Row of up to 3 pill/tag labels followed by icon items",
            "maxPills": 3,
            "example": ["Category A", "Category B", "Category C"],
        },
        "journey": {
            "description": "4-step horizontal process flow",
            "steps": 4,
            "example": {"step": "01", "title": "Discover", "label": "Research phase"},
        },
        "sparkline": {
            "description": "Bottom metrics row with up to 3 value/label pairs",
            "maxItems": 3,
            "example": {"value": "95%", "label": "Accuracy"},
        },
    },
}

COLOR_GROUPS = {
    "primary": {
        "deep_navy": "Background, headers, CTA bar, badge",
        "mid_navy": "Icon backgrounds, secondary accents",
        "gold": "CTA buttons, badge dots",
        "sky": "Highlights",
    },
    "neutral": {
        "text": "Primary body text",
        "muted": "Subtitles, descriptions, labels",
        "soft_gray": "Sparkline metric boxes",
        "card_bg": "Card fills",
        "shell_bg": "Main slide content area",
        "card_border": "Card borders, dividers",
    },
    "pills": {
        "pill_bg": "Tag/pill fill (warm cream)",
        "pill_color": "Tag/pill text (dark gold)",
    },
    "themeColors": {
        "accent1": "Purple accent",
        "accent2": "Coral/pink accent",
        "accent3": "Light green accent",
        "accent4": "Soft orange accent",
        "accent5": "Dark teal accent",
        "accent6": "Brown/amber accent",
        "hyperlink": "Link color",
    },
    "brand": {
        "deep_violet": "Brand color for titles",
    },
}

ICONS = {
    "recommended": [
        {"symbol": "◎", "unicode": "U+25CE", "usage": "Primary/first items"},
        {"symbol": "◆", "unicode": "U+25C6", "usage": "Secondary items"},
        {"symbol": "◈", "unicode": "U+25C8", "usage": "Tertiary items"},
        {"symbol": "◍", "unicode": "U+25CD", "usage": "Data/sources"},
        {"symbol": "✓", "unicode": "U+2713", "usage": "Governance/validation"},
        {"symbol": "⬡", "unicode": "U+2B21", "usage": "Infrastructure/systems"},
        {"symbol": "✦", "unicode": "U+2726", "usage": "Featured/priority"},
        {"symbol": "★", "unicode": "U+2605", "usage": "Highlights"},
    ],
    "additional": [
        {"symbol": "●", "unicode": "U+25CF", "usage": "Bullet point"},
        {"symbol": "○", "unicode": "U+25CB", "usage": "Empty circle"},
        {"symbol": "▶", "unicode": "U+25B6", "usage": "Action/play"},
        {"symbol": "◀", "unicode": "U+25C0", "usage": "Back/previous"},
        {"symbol": "▲", "unicode": "U+25B2", "usage": "Up/increase"},
        {"symbol": "▼", "unicode": "U+25BC", "usage": "Down/decrease"},
        {"symbol": "⚡", "unicode": "U+26A1", "usage": "Speed/power"},
        {"symbol": "⚙", "unicode": "U+2699", "usage": "Settings/config"},
    ],
}


def _result(payload: Dict[str, Any], is_error: bool = False) -> Dict[str, Any]:
    return {
        "content": [{"type": "text", "text": json.dumps(payload, indent=2, ensure_ascii=False)}],
        "isError": is_error,
    }


def _generate_slide(builder: SlideBuilder, args: Dict[str, Any]) -> Dict[str, Any]:
    slide_data = {key: args.get(key) for key in ("header", "leftCard", "rightCard", "ask")}
    # splitColumns is validated with the rest of the slide
    if "splitColumns" in args:
        slide_data["splitColumns"] = args["splitColumns"]
    output_path = args.get("outputPath") or DEFAULT_SLIDE_PATH
    path = builder.build_single_slide(slide_data, output_path)
    return {"success": True, "message": "Slide generated successfully", "outputPath": str(path)}


def _generate_presentation(builder: SlideBuilder, args: Dict[str, Any]) -> Dict[str, Any]:
    slides = args.get("slides") or []
    output_path = args.get("outputPath") or DEFAULT_PRESENTATION_PATH
    path = builder.build_presentation(slides, output_path, args.get("title"), args.get("author"))
    return {
        "success": True,
        "message": f"Presentation generated with {len(slides)} slide(s)",
        "outputPath": str(path),
    }


def _color_palette(builder: SlideBuilder, args: Dict[str, Any]) -> Dict[str, Any]:
    palette = builder.get_color_palette()
    return {
        group: {name: {"hex": f"#{palette[name]}", "usage": usage} for name, usage in colors.items()}
        for group, colors in COLOR_GROUPS.items()
    }


HANDLERS: Dict[str, Callable[[SlideBuilder, Dict[str, Any]], Dict[str, Any]]] = {
    "generate_slide": _generate_slide,
    "generate_presentation": _generate_presentation,
    "list_templates": lambda builder, args: TEMPLATES,
    "get_color_palette": _color_palette,
    "get_icons": lambda builder, args: ICONS,
}


def list_tools() -> List[Dict[str, Any]]:
    return TOOLS


def call_tool(name: str, arguments: Optional[Dict[str, Any]] = None,
              builder: Optional[SlideBuilder] = None) -> Dict[str, Any]:
    """
    Invoke a tool by name.

    Args:
        name: Tool name from TOOLS
        arguments: Tool arguments
        builder: SlideBuilder to use (a default one is created when omitted)

    Returns:
        {"content": [{"type": "text", "text": <json>}], "isError": bool}
    """
    handler = HANDLERS.get(name)
    if handler is None:
        logger.error(f"Unknown tool: {name}")
        return _result({"success": False, "error": f"Unknown tool: {name}", "errorType": "UnknownTool"}, True)

    try:
        builder = builder or SlideBuilder()
        payload = handler(builder, dict(arguments or {}))
    except DeckBuilderError as e:
        logger.error(f"Tool '{name}' failed: {e}")
        error = {"success": False, "error": str(e), "errorType": type(e).__name__}
        if getattr(e, 'field', None):
            error["field"] = e.field
        return _result(error, True)
    except Exception as e:
        logger.error(f"Tool '{name}' failed: {e}", exc_info=True)
        return _result({"success": False, "error": str(e), "errorType": type(e).__name__}, True)

    return _result(payload)
