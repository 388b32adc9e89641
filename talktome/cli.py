from __future__ import annotations

import argparse
import logging
import os
from enum import Enum
from typing import Any, List, Optional, Sequence, Tuple

from .chat.models import ChatMessageContainer
from .chat.service import ChatError, ChatService
from .config import DEFAULT_CONFIG_FILE, AppConfig, ConfigError, load_config
from .console_input import ConsoleSink, LineSink, get_input
from .console_input.prompt import LineSource
from .conversations import ConversationManager, conversation_name

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"


class MenuChoice(Enum):
    new = 0
    load = 1
    delete = 2
    exit = 3


def conversation_title(text: str) -> str:
    """A conversation name usable as a file name."""
    name = text.strip()
    if not name or name in {".", ".."} or any(ch in name for ch in "/\\"):
        raise ValueError(f"'{name}' cannot be used as a conversation name")
    return name


class ChatApp:
    def __init__(
        self,
        config: AppConfig,
        service: ChatService,
        manager: ConversationManager,
        source: Optional[LineSource] = None,
        sink: Optional[LineSink] = None,
    ) -> None:
        self.config = config
        self.service = service
        self.manager = manager
        self.source = source or input
        self.sink = sink or ConsoleSink()

    def ask(self, target: Any, message: Optional[str] = None, **options: Any) -> Any:
        return get_input(target, message, source=self.source, sink=self.sink, **options)

    # -------------------------------------------------

    def _new_conversation(self) -> Tuple[str, List[ChatMessageContainer]]:
        name = self.ask(conversation_title, "Enter a name for the new conversation:", show_options=False)
        history: List[ChatMessageContainer] = []
        if self.config.system_prompt:
            history.append(ChatMessageContainer.system(self.config.system_prompt))
        return name, history

    def choose_conversation(self) -> Optional[Tuple[str, List[ChatMessageContainer]]]:
        while True:
            conversations = self.manager.list_conversations()
            if not conversations:
                self.sink.write("No conversations available. Starting a new conversation.")
                return self._new_conversation()

            self.sink.write("Available conversations:")
            for index, file_name in conversations.items():
                self.sink.write(f"{index}: {file_name}")

            choice = self.ask(MenuChoice, "Choose an option:")
            if choice is MenuChoice.new:
                return self._new_conversation()
            if choice is MenuChoice.exit:
                return None

            number = self.ask(
                int,
                f"Enter the number of the conversation to {choice.name}:",
                is_range=True,
                string_options=["1", str(len(conversations))],
            )
            file_name = conversations[number]

            if choice is MenuChoice.load:
                try:
                    return conversation_name(file_name), self.manager.load_conversation(file_name)
                except ValueError as exc:
                    logger.warning("Failed to load %s: %s", file_name, exc)
                    self.sink.write(f"Could not load {file_name}: {exc}", color="red")
                    continue

            if self.manager.delete_conversation(file_name):
                self.sink.write("Conversation deleted successfully.")
            else:
                self.sink.write("Failed to delete conversation.", color="red")

    def chat(self, name: str, history: List[ChatMessageContainer]) -> None:
        self.sink.write(f"Chatbot is ready. Type '{EXIT_COMMAND}' to quit.")
        while True:
            line = self.source("You: ")
            if line is None:
                raise EOFError("input stream closed")
            text = line.strip()
            if not text:
                continue
            if text.lower() == EXIT_COMMAND:
                self.manager.save_conversation(history, name)
                return

            history.append(ChatMessageContainer.user(text))
            try:
                reply = self.service.perform_chat(history)
            except ChatError as exc:
                self.sink.write(f"Error: {exc}", color="red")
                continue
            self.service.process_response(reply, history, self.sink)
            self.manager.save_conversation(history, name)

    def run(self) -> int:
        try:
            selected = self.choose_conversation()
        except (EOFError, KeyboardInterrupt):
            self.sink.write("Exiting.")
            return 0
        if selected is None:
            return 0

        name, history = selected
        try:
            self.chat(name, history)
        except (EOFError, KeyboardInterrupt):
            self.manager.save_conversation(history, name)
            self.sink.write("Exiting.")
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="talktome", description="Chat with a local model from the console.")
    parser.add_argument("--config", default=DEFAULT_CONFIG_FILE, help="Path to the JSON settings file")
    parser.add_argument("--model", help="Ollama model id (overrides settings and TALKTOME_MODEL)")
    parser.add_argument("--host", help="Ollama host URL (overrides settings and OLLAMA_HOST)")
    parser.add_argument("--conversations", help="Folder holding saved conversations")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None, source: Optional[LineSource] = None, sink: Optional[LineSink] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    sink = sink or ConsoleSink()

    env_overrides = {}
    if args.model:
        env_overrides["TALKTOME_MODEL"] = args.model
    try:
        config = load_config(args.config, env={**os.environ, **env_overrides})
    except ConfigError as exc:
        sink.write(str(exc), color="red")
        return 1
    if args.host:
        config.host = args.host
    if args.conversations:
        config.conversations_folder = args.conversations

    app = ChatApp(
        config,
        ChatService(config.model, host=config.host),
        ConversationManager(config.conversations_folder),
        source=source,
        sink=sink,
    )
    return app.run()


__all__ = ["ChatApp", "MenuChoice", "conversation_title", "build_parser", "main"]
