"""Settings file schema for envswitch."""

SETTINGS_SCHEMA = {
    "type": "object",
    "properties": {
        "indicator": {
            "type": "object",
            "properties": {
                "alignment": {
                    "type": "string",
                    "enum": ["left", "right"],
                    "description": "Side of the terminal the status indicator is drawn on"
                }
            },
            "additionalProperties": False
        },
        "prompt": {
            "type": "object",
            "properties": {
                "title": {
                    "type": "string",
                    "minLength": 1,
                    "description": "Heading shown above the environment list"
                },
                "hint": {
                    "type": "string",
                    "description": "Description shown next to every environment"
                }
            },
            "additionalProperties": False
        }
    },
    "additionalProperties": False
}

DEFAULT_SETTINGS = {
    "indicator": {
        "alignment": "right",
    },
    "prompt": {
        "title": "Select the environment to activate",
        "hint": "Activate this environment",
    },
}
