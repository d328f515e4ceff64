"""Unified entry point for the user and order services.

Launches one or both services with uvicorn.  When both are selected
they run concurrently in one event loop; if either exits with an
exception the other is cancelled.

Configuration (ports, host, user service URL, timeouts, log level) is
read from environment variables, see ``shop_services.core.config``.

Usage:
    python run.py            # both services
    python run.py users      # user service only
    python run.py orders     # order service only
"""
import argparse
import asyncio
import logging

from uvicorn import Config, Server

from shop_services.core.config import settings


def _server(app_path: str, port: int) -> Server:
    config = Config(app=app_path, host=settings.host, port=port, reload=False, log_level=settings.log_level.lower())
    return Server(config)


async def run_users() -> None:
    """Serve the user service on ``USER_SERVICE_PORT``."""
    await _server("shop_services.main:user_app", settings.user_service_port).serve()


async def run_orders() -> None:
    """Serve the order service on ``ORDER_SERVICE_PORT``."""
    await _server("shop_services.main:order_app", settings.order_service_port).serve()


async def main(which: str) -> None:
    """Run the selected services concurrently."""
    runners = {"users": [run_users], "orders": [run_orders], "all": [run_users, run_orders]}[which]
    tasks = [asyncio.create_task(runner()) for runner in runners]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    for task in done:
        if exception := task.exception():
            logging.exception("Exception in service", exc_info=exception)
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run the shop services")
    parser.add_argument("service", nargs="?", choices=("users", "orders", "all"), default="all")
    args = parser.parse_args()
    try:
        asyncio.run(main(args.service))
    except (KeyboardInterrupt, SystemExit):
        pass
