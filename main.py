import argparse
import logging
import sys

from config import LOG_LEVELS, config
from monitor import PriceMonitor
from price_history import PriceHistoryObserver
from telegram_observer import TelegramObserver

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Product price observer console')
    parser.add_argument('--history', type=str, default=None,
                        help='Write the price history to this CSV file on exit')
    parser.add_argument('--interval', type=float, default=None,
                        help='Idle loop tick in seconds')
    parser.add_argument('--log-level', type=str.upper, default=None, choices=LOG_LEVELS,
                        help='Logging level')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    if args.interval is not None:
        config.IDLE_INTERVAL = args.interval
    if args.log_level:
        config.LOG_LEVEL = args.log_level

    # a bad PRICE_LOG_LEVEL is rejected when PriceMonitor validates the config
    level = config.LOG_LEVEL.upper()
    logging.basicConfig(
        level=level if level in LOG_LEVELS else 'WARNING',
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    observers = []
    history = None
    if args.history:
        history = PriceHistoryObserver()
        observers.append(history)
    if config.telegram_configured:
        observers.append(TelegramObserver())

    try:
        monitor = PriceMonitor(config, extra_observers=observers)
        monitor.run()
    except KeyboardInterrupt:
        logger.info("Stopped by user")
    except Exception:
        logger.exception("Price monitor failed")
        return 1
    finally:
        if history is not None:
            history.save_csv(args.history)
            logger.info(f"Price history written to {args.history}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
