class StockLedgerError(Exception):
    """Caller-visible rejection of a movement; nothing was written."""


class InvalidMovementError(StockLedgerError):
    pass


class InvalidFloorError(InvalidMovementError):
    def __init__(self, floor):
        super().__init__("Invalid floor")
        self.floor = floor


class InsufficientStockError(StockLedgerError):
    def __init__(self, barcode: str, floor: str):
        super().__init__("No stock")
        self.barcode = barcode
        self.floor = floor
