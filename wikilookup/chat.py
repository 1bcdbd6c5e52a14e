"""Chat markup helpers for clickable commands and expandable text blobs."""

from __future__ import annotations


def _attribute(value: str) -> str:
    return value.replace('"', '&quot;')


class ChatFormatter:
    """Builds the chat markup the lookup replies are made of.

    A chat command is an anchor the client runs as a command when clicked;
    a blob is a titled link that opens ``body`` in a popup window.
    """

    def chat_command(self, label: str, command: str) -> str:
        return f"<a href='chatcmd://{command}'>{label}</a>"

    def blob(self, title: str, body: str) -> str:
        content = _attribute(body).replace('\n', '<br>')
        return f'<a href="text://{_attribute(title)}<br><br>{content}">{title}</a>'
