"""
Shared slide content used across the test suite.
"""

import copy

STRATEGY_SLIDE = {
    "header": {
        "eyebrow": "Test Category",
        "title": "PowerPoint Generator Test",
        "subtitle": "Verifying the slide builder works correctly.",
        "badge": "Test Badge",
    },
    "leftCard": {
        "title": "Test Features",
        "type": "iconGrid",
        "items": [
            {"icon": "◎", "title": "Feature One", "detail": "Testing icon grid layout."},
            {"icon": "◆", "title": "Feature Two", "detail": "Testing multiple items."},
            {"icon": "◈", "title": "Feature Three", "detail": "Testing third item."},
        ],
        "sparkline": [
            {"value": "100%", "label": "Complete"},
            {"value": "Fast", "label": "Speed"},
            {"value": "Ready", "label": "Status"},
        ],
    },
    "rightCard": {
        "title": "Test Pills",
        "type": "pills",
        "pills": ["Category A", "Category B", "Category C"],
        "items": [
            {"icon": "◍", "title": "Pill Item One", "detail": "Testing pills type."},
            {"icon": "✓", "title": "Pill Item Two", "detail": "Testing validation."},
            {"icon": "⬡", "title": "Pill Item Three", "detail": "Testing systems."},
        ],
    },
    "ask": {
        "icon": "✦",
        "title": "Test CTA",
        "text": "This is a test call-to-action bar.",
        "cta": "Test",
    },
}

JOURNEY_SLIDE = {
    "header": {
        "eyebrow": "Process Flow",
        "title": "Journey Test Slide",
        "subtitle": "Testing the journey card type.",
        "badge": "Journey Test",
    },
    "leftCard": {
        "title": "Process Steps",
        "type": "journey",
        "journey": [
            {"step": "01", "title": "Start", "label": "Begin here"},
            {"step": "02", "title": "Work", "label": "Do things"},
            {"step": "03", "title": "Review", "label": "Check work"},
            {"step": "04", "title": "Done", "label": "Complete"},
        ],
        "sparkline": [
            {"value": "4", "label": "Steps"},
            {"value": "Quick", "label": "Flow"},
            {"value": "Easy", "label": "Process"},
        ],
    },
    "rightCard": {
        "title": "Details",
        "type": "iconGrid",
        "items": [
            {"icon": "◎", "title": "Detail One", "detail": "Journey slide details."},
            {"icon": "◆", "title": "Detail Two", "detail": "More information here."},
        ],
    },
    "ask": {
        "icon": "◆",
        "title": "Journey Complete",
        "text": "The journey slide test is complete.",
        "cta": "Finish",
    },
    "splitColumns": True,
}


def strategy_slide():
    return copy.deepcopy(STRATEGY_SLIDE)


def journey_slide():
    return copy.deepcopy(JOURNEY_SLIDE)
