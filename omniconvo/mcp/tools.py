"""Tool catalogue advertised through tools/list."""

SAVE_CONVERSATION = "save_conversation"

SAVE_CONVERSATION_TOOL = {
    "name": SAVE_CONVERSATION,
    "description": "Saves the current conversation to OmniConvo and returns a permanent shareable link.",
    "inputSchema": {
        "type": "object",
        "properties": {
            "conversation_text": {
                "type": "string",
                "description": "The full text of the conversation to save.",
            },
            "conversation_history": {
                "type": "array",
                "description": "The conversation as ordered turns.",
                "items": {
                    "type": "object",
                    "properties": {
                        "role": {"type": "string", "enum": ["human", "assistant"]},
                        "content": {"type": "string"},
                        "timestamp": {"type": "string", "description": "ISO-8601 send time"},
                    },
                    "required": ["role", "content"],
                },
            },
            "title": {
                "type": "string",
                "description": "Optional title for the saved conversation.",
            },
        },
        "anyOf": [
            {"required": ["conversation_text"]},
            {"required": ["conversation_history"]},
        ],
    },
}

TOOLS = [SAVE_CONVERSATION_TOOL]
