from dataclasses import dataclass, field, fields, asdict
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from .exceptions import ValidationFailure

DEFAULT_GRAMS = (100, 200, 300, 400)


def parse_price(value):
    try:
        price = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationFailure(f'Price must be a number, got {value!r}',
                                {'price': 'A valid number is required'})
    if not price.is_finite() or price < 0:
        raise ValidationFailure(f'Price must be zero or more, got {value!r}',
                                {'price': 'A non-negative number is required'})
    return price


@dataclass
class QuantityOption:
    quantity_value: str = ''
    quantity_grams: Optional[int] = 0
    price: Decimal = Decimal('0')
    is_available: bool = True

    @classmethod
    def from_record(cls, record):
        return cls(
            quantity_value=record.get('quantity_value') or '',
            quantity_grams=record.get('quantity_grams'),
            price=Decimal(str(record.get('price') or 0)),
            is_available=bool(record.get('is_available', True)),
        )

    @property
    def is_valid(self):
        return self.is_available and self.quantity_value.strip() != ''

    def to_payload(self):
        payload = asdict(self)
        payload['quantity_value'] = self.quantity_value.strip()
        payload['price'] = str(self.price)
        return payload


@dataclass
class QuantitySchedule:
    """
    Ordered, editable quantity/price rows of one ingredient. Rows are only
    filtered when the schedule is submitted, never while editing.
    """
    rows: List[QuantityOption] = field(default_factory=list)

    @classmethod
    def default(cls):
        return cls([QuantityOption(quantity_value=f'{grams}g', quantity_grams=grams)
                    for grams in DEFAULT_GRAMS])

    @classmethod
    def from_records(cls, records):
        return cls([QuantityOption.from_record(record) for record in records or []])

    def __len__(self):
        return len(self.rows)

    def add_row(self):
        row = QuantityOption()
        self.rows.append(row)
        return row

    def update_row(self, index, name, value):
        if name not in {f.name for f in fields(QuantityOption)}:
            raise AttributeError(name)
        if name == 'price':
            value = parse_price(value)
        setattr(self.rows[index], name, value)
        return self.rows[index]

    def remove_row(self, index):
        return self.rows.pop(index)

    def valid_rows(self):
        return [row for row in self.rows if row.is_valid]

    def to_payload(self):
        return [row.to_payload() for row in self.valid_rows()]
