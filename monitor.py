import logging
import threading

from config import config as default_config
from console_observer import ConsoleObserver
from formatting import PriceParseError, to_price
from product import Product
from product_manager import ProductManager

logger = logging.getLogger(__name__)


class InvalidSelectorError(ValueError):
    pass


class PriceMonitor:
    """Interactive price console.

    The input loop runs in the calling thread; a second, idle loop ticks in a
    daemon thread until the input loop finishes.
    """

    def __init__(self, config=None, input_func=input, extra_observers=()):
        self.config = config or default_config
        self.config.validate()
        self.input_func = input_func
        self.manager = ProductManager()

        self.selectors = {}
        for selector, (name, price) in self.config.PRODUCTS.items():
            Product(name, price, manager=self.manager)
            self.selectors[selector.lower()] = name

        for selector, observer_names in self.config.OBSERVERS.items():
            product = self.manager.get_product_by_name(self.config.PRODUCTS[selector][0])
            for observer_name in observer_names:
                product.register(ConsoleObserver(observer_name))

        # Attached to every product
        for observer in extra_observers:
            for name in self.manager.product_names():
                self.manager.get_product_by_name(name).register(observer)

        self._stop_event = threading.Event()
        self._idle_thread = None

    @property
    def prompt(self):
        letters = "/".join(self.config.PRODUCTS)
        return f"\nEnter product name ({letters}) to change price or type '{self.config.EXIT_COMMAND}' to quit:"

    def select_product(self, text):
        name = self.selectors.get(text.strip().lower())
        if name is None:
            raise InvalidSelectorError("Invalid product name.")
        return self.manager.get_product_by_name(name)

    def parse_price(self, text):
        if not text or not text.strip():
            raise PriceParseError("Invalid price input.")
        try:
            return to_price(text)
        except PriceParseError:
            raise PriceParseError("Invalid price input.") from None

    def read_line(self, prompt):
        print(prompt)
        try:
            return self.input_func()
        except EOFError:
            return None

    def is_exit(self, text):
        return text.strip().lower() == self.config.EXIT_COMMAND.lower()

    def idle_loop(self):
        """Keeps a second unit of work alive; does nothing per tick."""
        ticks = 0
        while not self._stop_event.wait(self.config.IDLE_INTERVAL):
            ticks += 1
            logger.debug(f"Idle tick {ticks}")
        logger.debug("Idle loop stopped")

    def start(self):
        if self._idle_thread is not None:
            return
        self._stop_event.clear()
        self._idle_thread = threading.Thread(target=self.idle_loop, name="idle-loop", daemon=True)
        self._idle_thread.start()

    def stop(self):
        self._stop_event.set()
        if self._idle_thread is not None:
            self._idle_thread.join()
            self._idle_thread = None

    def run(self):
        """Runs the input loop until 'exit' or end of input."""
        logger.info(f"Starting price monitor for {len(self.manager)} product(s)")
        self.start()
        try:
            while True:
                selector = self.read_line(self.prompt)
                if selector is None or self.is_exit(selector):
                    break

                try:
                    product = self.select_product(selector)
                except InvalidSelectorError as e:
                    print(e)
                    continue

                price_text = self.read_line("Enter new price:")
                if price_text is None:
                    break
                try:
                    new_price = self.parse_price(price_text)
                except PriceParseError as e:
                    print(e)
                    continue

                product.change_price(new_price)
        finally:
            self.stop()
            logger.info("Price monitor stopped")
