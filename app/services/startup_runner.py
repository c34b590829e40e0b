"""
One-shot sequence run against the interests endpoint when the service starts.

Usage (against an already running server):
    python -m app.services.startup_runner
"""

from app.core.config import settings
from app.core.logging_config import get_logger, setup_logging
from app.services.interest_client import InterestClient

logger = get_logger(__name__)

# Always the first id handed out by a fresh store; not taken from the create response.
DEMO_INTEREST_ID = 1


def run_startup_sequence(client: InterestClient) -> str:
    """
    Create, update, retrieve and delete an interest, in that order.

    The retrieved text is printed to stdout and returned. Any failure
    propagates and stops the remaining steps.
    """
    created = client.create("volleyball")
    logger.info(f"Startup sequence created interest {created.id}")

    client.update(DEMO_INTEREST_ID, "cricket")

    retrieved = client.retrieve(DEMO_INTEREST_ID)
    print(retrieved.interest)

    client.delete(DEMO_INTEREST_ID)
    logger.info(f"Startup sequence finished, deleted interest {DEMO_INTEREST_ID}")

    return retrieved.interest


def main() -> None:
    setup_logging(settings.LOG_LEVEL, settings.JSON_LOGS)
    with InterestClient(settings.CLIENT_BASE_URL) as client:
        run_startup_sequence(client)


if __name__ == "__main__":
    main()
