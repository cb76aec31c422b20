from __future__ import annotations

import sys

import uvicorn

from order_taking.adapters.inbound.cli import run_cli
from order_taking.bootstrap import build_place_order_workflow
from order_taking.config.logging import configure_logging
from order_taking.config.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "order_taking.bootstrap:create_asgi_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=None,
    )


def cli_main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    if not argv:
        print("usage: order-taking-cli '<json>'")
        return 2

    settings = get_settings()
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
    return run_cli(build_place_order_workflow(settings), argv[0])


if __name__ == "__main__":
    raise SystemExit(cli_main())
