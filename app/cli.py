"""Command line entry points for running the stock rules without HTTP."""
import argparse
import asyncio
import sys

from pydantic import ValidationError

from app.core.context import new_correlation_id
from app.core.errors import ErrorResponse
from app.core.logger import logger
from app.db.mongodb import close_mongo_connection
from app.dependencies.services import get_order_service


async def _process_order(order_id: int) -> int:
    new_correlation_id()
    try:
        service = await get_order_service()
        processed = await service.process_order(order_id)
        print(f"Processed order {processed}")
        return 0
    except ErrorResponse as e:
        logger.error(f"Could not process order {order_id}: {e.message}", metadata=e.details)
        return 1
    except ValidationError as e:
        logger.error(
            f"Order {order_id} holds an invalid product record",
            error=e,
            metadata={"order_id": order_id, "errors": e.errors(include_url=False)}
        )
        return 1
    finally:
        await close_mongo_connection()


def cmd_process_order(args):
    return asyncio.run(_process_order(args.order_id))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="inventory-rules", description="Inventory rules service tools")
    sub = parser.add_subparsers(dest="cmd")

    p = sub.add_parser("process-order", help="Apply stock rules to every line of an order")
    p.add_argument("order_id", type=int)
    p.set_defaults(func=cmd_process_order)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "func", None):
        parser.print_help()
        return 2
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
