"""
Morse Skill Tests
=================

The morse-code-translator tool: dict in, dict out, never raises.
"""

from unittest.mock import patch

import pytest


class TestMorseTool:

    def test_encode(self, morse_skill):
        result = morse_skill.morse_tool({"action": "encode", "text": "SOS"})
        assert result == {"success": True, "text": "SOS", "morse": "... --- ..."}

    def test_decode(self, morse_skill):
        result = morse_skill.morse_tool({"action": "decode", "morse": "... --- ..."})
        assert result == {"success": True, "morse": "... --- ...", "text": "SOS"}

    def test_hello_world_round_trip(self, morse_skill):
        encoded = morse_skill.morse_tool({"action": "encode", "text": "Hello World"})
        decoded = morse_skill.morse_tool({"action": "decode", "morse": encoded["morse"]})
        assert decoded["text"] == "HELLO WORLD"

    def test_unrecognized_pattern_is_placeholder(self, morse_skill):
        result = morse_skill.morse_tool({"action": "decode", "morse": "......"})
        assert result["success"] is True
        assert result["text"] == "?"

    @pytest.mark.parametrize("params,expected", [
        ({"action": "encode"}, ""),
        ({"action": "encode", "text": ""}, ""),
        ({"action": "encode", "text": None}, ""),
    ])
    def test_empty_text_encodes_to_empty(self, morse_skill, params, expected):
        result = morse_skill.morse_tool(params)
        assert result["success"] is True
        assert result["morse"] == expected

    def test_empty_morse_decodes_to_empty(self, morse_skill):
        result = morse_skill.morse_tool({"action": "decode", "morse": ""})
        assert result == {"success": True, "morse": "", "text": ""}

    def test_param_aliases(self, morse_skill):
        assert morse_skill.morse_tool({"action": "encode", "message": "E"})["morse"] == "."
        assert morse_skill.morse_tool({"action": "decode", "code": "-"})["text"] == "T"
        assert morse_skill.morse_tool({"mode": "decode", "morse_code": ".-"})["text"] == "A"

    def test_decode_reads_input_given_as_text(self, morse_skill):
        result = morse_skill.morse_tool({"action": "decode", "input": "... --- ..."})
        assert result == {"success": True, "morse": "... --- ...", "text": "SOS"}

    def test_encode_reads_input_given_as_morse(self, morse_skill):
        result = morse_skill.morse_tool({"action": "encode", "code": "SOS"})
        assert result == {"success": True, "text": "SOS", "morse": "... --- ..."}

    def test_matching_key_wins_over_other_key(self, morse_skill):
        result = morse_skill.morse_tool({"action": "decode", "morse": ".", "text": "ignored"})
        assert result["text"] == "E"

    def test_missing_action(self, morse_skill):
        result = morse_skill.morse_tool({"text": "SOS"})
        assert result["success"] is False
        assert result["error"] == "action parameter is required"

    def test_unknown_action(self, morse_skill):
        result = morse_skill.morse_tool({"action": "shout", "text": "SOS"})
        assert result["success"] is False
        assert result["error"].startswith("Unknown action: shout")

    def test_non_string_text(self, morse_skill):
        result = morse_skill.morse_tool({"action": "encode", "text": 123})
        assert result["success"] is False
        assert result["error"] == "text must be str"

    def test_oversized_input(self, morse_skill):
        text = "E" * (morse_skill.MAX_INPUT_LENGTH + 1)
        result = morse_skill.morse_tool({"action": "encode", "text": text})
        assert result["success"] is False
        assert "cannot exceed" in result["error"]

    def test_engine_failure_is_reported_not_raised(self, morse_skill):
        with patch.object(morse_skill, "encode", side_effect=RuntimeError("boom")):
            result = morse_skill.morse_tool({"action": "encode", "text": "SOS"})

        assert result["success"] is False
        assert result["error"] == "Failed to execute morse_tool: boom"

    def test_exports(self, morse_skill):
        assert morse_skill.__all__ == ["morse_tool"]
