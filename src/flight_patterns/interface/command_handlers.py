"""CLI command handlers.

Each handler takes the parsed argparse namespace and returns plain data that
the CLI formatters render.
"""
import argparse
from abc import ABC, abstractmethod
from typing import Any, Dict

from flight_patterns.application.passenger.builder import get_registered_wraps, get_wrap_class
from flight_patterns.bootstrap import Application
from flight_patterns.domain.friends.person import Person


class CLICommandHandler(ABC):
    """Base class for CLI command handlers."""

    def __init__(self, app: Application):
        self.app = app

    @abstractmethod
    def handle(self, args: argparse.Namespace) -> Dict[str, Any]:
        """Execute the command and return data for output."""


class ListDemoProfilesCLIHandler(CLICommandHandler):
    """Standard, economic and double-decorated business profiles."""

    def handle(self, args: argparse.Namespace) -> Dict[str, Any]:
        summaries = self.app.get_quote_service().list_demo_profiles()
        return {"passengers": [summary.to_dict() for summary in summaries]}


class QuotePassengerCLIHandler(CLICommandHandler):
    def handle(self, args: argparse.Namespace) -> Dict[str, Any]:
        quote = self.app.get_quote_service().quote(
            name=getattr(args, "name", None),
            wraps=getattr(args, "wraps", None),
            extra_kg=getattr(args, "extra_kg", None),
        )
        return {"quote": quote.to_dict()}


class ListWrapsCLIHandler(CLICommandHandler):
    def handle(self, args: argparse.Namespace) -> Dict[str, Any]:
        return {
            "wraps": [
                {"name": name, "class": get_wrap_class(name).__name__}
                for name in get_registered_wraps()
            ]
        }


class ListFriendsCLIHandler(CLICommandHandler):
    def handle(self, args: argparse.Namespace) -> Dict[str, Any]:
        friends = self.app.get_friends_api().get_friends()
        return {"friends": [friend.to_dict() for friend in friends]}


class AddFriendCLIHandler(ListFriendsCLIHandler):
    def handle(self, args: argparse.Namespace) -> Dict[str, Any]:
        person = Person(name=args.name, surname=args.surname, genre=args.genre, age=args.age)
        self.app.get_friends_api().add_friend(person)
        return super().handle(args)


class DeleteFriendCLIHandler(ListFriendsCLIHandler):
    def handle(self, args: argparse.Namespace) -> Dict[str, Any]:
        self.app.get_friends_api().delete_friend(args.index)
        return super().handle(args)


COMMAND_HANDLERS = {
    ("passengers", "list"): ListDemoProfilesCLIHandler,
    ("passengers", "quote"): QuotePassengerCLIHandler,
    ("passengers", "wraps"): ListWrapsCLIHandler,
    ("friends", "list"): ListFriendsCLIHandler,
    ("friends", "add"): AddFriendCLIHandler,
    ("friends", "delete"): DeleteFriendCLIHandler,
}
