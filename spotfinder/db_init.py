import sys

import structlog

from . import config
from .store import LocationStore

logger = structlog.get_logger()


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    path = argv[0] if argv else config.DB_PATH

    config.configure_logging()
    with LocationStore.open(path, seed=config.SEED_ON_CREATE) as store:
        n = store.count()

    logger.info("db_ready", path=path, count=n)
    print(f"DB ready: {path} ({n} locations)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
