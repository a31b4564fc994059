from .csv_loader import read_csv

__all__ = ["read_csv"]
