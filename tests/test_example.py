import logging
from typing import Protocol

from typebind.context import new_context


class Logger(Protocol):
    def info(self, msg: str, *args) -> None: ...


class EchoHandler:
    def handle(self, body: str) -> str:
        return body


class Server:
    def __init__(self):
        self.logger = None
        self.echo_handler = None

    def serve(self, body: str) -> str:
        self.logger.info("Serving %s", body)
        return self.echo_handler.handle(body)

    def bind(self, logger: Logger, echo: EchoHandler):
        self.logger = logger
        self.echo_handler = echo


def test_function_and_bind_method_usage(caplog):
    # Create the context and add dependencies
    context = new_context().add(logging.getLogger("example"), EchoHandler())

    # Method 1: a function whose parameters are injected
    responses = []

    def start_server(logger: Logger, echo: EchoHandler):
        logger.info("Starting")
        responses.append(echo.handle("ping"))

    with caplog.at_level(logging.INFO, logger="example"):
        context.inject(start_server)

        # Method 2: an object with a bind method
        server = Server()
        context.inject(server)
        responses.append(server.serve("pong"))

    assert responses == ["ping", "pong"]
    assert [r.getMessage() for r in caplog.records if r.name == "example"] == [
        "Starting",
        "Serving pong",
    ]
