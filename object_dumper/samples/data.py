"""In-memory sample data: a small slice of a trading company's records."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Order:
    order_id: int
    order_date: datetime
    total: Decimal


@dataclass(frozen=True)
class Customer:
    customer_id: str
    company_name: str
    address: str
    city: str
    region: Optional[str]
    postal_code: Optional[str]
    country: str
    phone: str
    fax: Optional[str] = None
    orders: Tuple[Order, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Product:
    product_id: int
    product_name: str
    category: str
    unit_price: Decimal
    units_in_stock: int


@dataclass(frozen=True)
class Supplier:
    supplier_name: str
    address: str
    city: str
    country: str


def _order(order_id: int, date: str, total: str) -> Order:
    return Order(order_id, datetime.strptime(date, '%Y-%m-%d'), Decimal(total))


def _customers() -> List[Customer]:
    return [
        Customer('ALFKI', 'Alfreds Futterkiste', 'Obere Str. 57', 'Berlin', None, '12209', 'Germany',
                 '030-0074321', '030-0076545', (
                     _order(10643, '1997-08-25', '814.50'),
                     _order(10692, '1997-10-03', '878.00'),
                     _order(10702, '1997-10-13', '330.00'),
                 )),
        Customer('AROUT', 'Around the Horn', '120 Hanover Sq.', 'London', None, 'WA1 1DP', 'UK',
                 '(171) 555-7788', '(171) 555-6750', (
                     _order(10355, '1996-11-15', '480.00'),
                     _order(10383, '1996-12-16', '899.00'),
                     _order(10453, '1997-02-21', '407.70'),
                 )),
        Customer('BSBEV', "B's Beverages", 'Fauntleroy Circus', 'London', None, 'EC2 5NT', 'UK',
                 '(171) 555-1212', None, (
                     _order(10289, '1996-08-26', '479.40'),
                     _order(10471, '1997-03-11', '1328.00'),
                 )),
        Customer('LAZYK', 'Lazy K Kountry Store', '12 Orchestra Terrace', 'Walla Walla', 'WA', '99362', 'USA',
                 '(509) 555-7969', '(509) 555-6221', (
                     _order(10482, '1997-03-21', '147.00'),
                     _order(10545, '1997-05-22', '210.00'),
                 )),
        Customer('PARIS', 'Paris spécialités', '265, boulevard Charonne', 'Paris', None, '75012', 'France',
                 '(1) 42.34.22.66', '(1) 42.34.22.77'),
        Customer('SEVES', 'Seven Seas Imports', '90 Wadhurst Rd.', 'London', None, 'OX15 4NB', 'UK',
                 '(171) 555-1717', '(171) 555-5646', (
                     _order(10359, '1996-11-21', '3471.68'),
                     _order(10377, '1996-12-09', '863.60'),
                 )),
        Customer('SPLIR', 'Split Rail Beer & Ale', 'P.O. Box 555', 'Lander', 'WY', '82520', 'USA',
                 '(307) 555-4680', '(307) 555-6525', (
                     _order(10271, '1996-08-01', '48.00'),
                 )),
        Customer('FRANS', 'Franchi S.p.A.', 'Via Monte Bianco 34', 'Torino', None, '10100', 'Italy',
                 '011-4988260', '011-4988261', (
                     _order(10422, '1997-01-22', '49.80'),
                 )),
    ]


def _products() -> List[Product]:
    return [
        Product(1, 'Chai', 'Beverages', Decimal('18.00'), 39),
        Product(2, 'Chang', 'Beverages', Decimal('19.00'), 17),
        Product(3, 'Aniseed Syrup', 'Condiments', Decimal('10.00'), 13),
        Product(5, "Chef Anton's Gumbo Mix", 'Condiments', Decimal('21.35'), 0),
        Product(9, 'Mishi Kobe Niku', 'Meat/Poultry', Decimal('97.00'), 29),
        Product(17, 'Alice Mutton', 'Meat/Poultry', Decimal('39.00'), 0),
        Product(29, 'Thüringer Rostbratwurst', 'Meat/Poultry', Decimal('123.79'), 0),
        Product(38, 'Côte de Blaye', 'Beverages', Decimal('263.50'), 17),
        Product(43, 'Ipoh Coffee', 'Beverages', Decimal('46.00'), 17),
        Product(54, 'Tourtière', 'Meat/Poultry', Decimal('7.45'), 21),
    ]


def _suppliers() -> List[Supplier]:
    return [
        Supplier('Exotic Liquids', '49 Gilbert St.', 'London', 'UK'),
        Supplier('Heli Süßwaren GmbH & Co. KG', 'Tiergartenstraße 5', 'Berlin', 'Germany'),
        Supplier('Aux joyeux ecclésiastiques', '203, Rue des Francs-Bourgeois', 'Paris', 'France'),
        Supplier('Bigfoot Breweries', '3400 - 8th Avenue Suite 210', 'Bend', 'USA'),
        Supplier('Pasta Buttini s.r.l.', 'Via dei Gelsomini, 153', 'Salerno', 'Italy'),
    ]


class DataSource:
    def __init__(self):
        self.customers: List[Customer] = _customers()
        self.products: List[Product] = _products()
        self.suppliers: List[Supplier] = _suppliers()
