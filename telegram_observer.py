import logging
from datetime import datetime

import requests

from config import config
from formatting import format_price
from observer import Observer

logger = logging.getLogger(__name__)


class TelegramObserver(Observer):
    """Pushes price updates to a Telegram chat through the Bot API."""

    def __init__(self, bot_token=None, chat_id=None, enabled=None):
        self.bot_token = config.TELEGRAM_BOT_TOKEN if bot_token is None else bot_token
        self.chat_id = config.TELEGRAM_CHAT_ID if chat_id is None else chat_id
        if enabled is None:
            enabled = config.TELEGRAM_ENABLED
        self.enabled = bool(enabled and self.bot_token and self.chat_id)

        if self.enabled:
            logger.info("Telegram observer initialized")
        else:
            logger.warning("Telegram observer disabled - check token and chat_id")

    def send_message(self, message: str) -> bool:
        if not self.enabled:
            return False

        try:
            url = f"https://api.telegram.org/bot{self.bot_token}/sendMessage"
            payload = {
                'chat_id': self.chat_id,
                'text': message,
                'parse_mode': 'HTML'
            }

            response = requests.post(url, json=payload, timeout=10)
            if response.status_code != 200:
                logger.warning(f"Telegram API returned {response.status_code}")
            return response.status_code == 200

        except requests.RequestException as e:
            logger.error(f"Error sending Telegram message: {e}")
            return False

    def update(self, product):
        if not self.enabled:
            return
        message = (
            f"<b>PRICE UPDATE</b>\n"
            f"Product: {product.name}\n"
            f"Price: {format_price(product.price)}\n"
            f"Time: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}"
        )
        self.send_message(message)
