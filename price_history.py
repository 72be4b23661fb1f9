from datetime import datetime

import pandas as pd

from config import config
from observer import Observer

COLUMNS = ['timestamp', 'product', 'price']


class PriceHistoryObserver(Observer):
    def __init__(self, max_points=None):
        self.max_points = max_points or config.HISTORY_MAX_POINTS
        self.data = {}

    def update(self, product):
        self.add_point(product.name, product.price)

    def add_point(self, product_name: str, price, timestamp=None):
        if product_name not in self.data:
            self.data[product_name] = []
        self.data[product_name].append((timestamp or datetime.now(), price))

        if len(self.data[product_name]) > self.max_points:
            self.data[product_name] = self.data[product_name][-self.max_points:]

    def get_history(self, product_name: str):
        return [price for _, price in self.data.get(product_name, [])]

    def to_frame(self) -> pd.DataFrame:
        rows = [
            (timestamp, name, float(price))
            for name, points in self.data.items()
            for timestamp, price in points
        ]
        df = pd.DataFrame(rows, columns=COLUMNS)
        return df.sort_values('timestamp', kind='stable').reset_index(drop=True)

    def save_csv(self, path):
        self.to_frame().to_csv(path, index=False)
