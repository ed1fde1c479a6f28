
import datetime
from decimal import Decimal


class Utils:
    @staticmethod
    def normalize_date(d):
        if not d:
            return None
        if isinstance(d, (datetime.date, datetime.datetime)):
            return d.isoformat()
        return d

    @staticmethod
    def decimal_to_exact(value):
        """Integral Decimals become int, the rest keep their digits as a string."""
        if isinstance(value, Decimal):
            if value.is_finite() and value == value.to_integral_value():
                return int(value)
            return str(value)
        return value

    @staticmethod
    def to_json_value(value):
        """Make a warehouse value safe for a JSON request body; strings pass through."""
        if isinstance(value, Decimal):
            return Utils.decimal_to_exact(value)
        if isinstance(value, (datetime.date, datetime.datetime)):
            return Utils.normalize_date(value)
        return value
