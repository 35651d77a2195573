"""Query samples over the in-memory data source."""
from __future__ import annotations

import statistics
from decimal import Decimal
from itertools import groupby
from types import SimpleNamespace

from .data import DataSource
from .harness import SampleHarness, category, description, linked_method, title


class QuerySamples(SampleHarness):
    TITLE = 'Query Module'
    PREFIX = 'query'

    def __init__(self, settings=None):
        self.data_source = DataSource()
        super().__init__(settings)

    @category('Restriction Operators')
    @title('Where - Task 1')
    @description('This sample uses a filter to find all elements of an array with a value less than 5.')
    def query1(self):
        numbers = [5, 4, 1, 3, 9, 8, 6, 7, 2, 0]

        low_nums = [num for num in numbers if num < 5]

        self.write_line('Numbers < 5:')
        self.dump(low_nums)

    @category('Restriction Operators')
    @title('Where - Task 2')
    @description('This sample returns all products that are in stock.')
    def query2(self):
        products = [p for p in self.data_source.products if p.units_in_stock > 0]

        for p in products:
            self.dump(p)

    @category('Restriction Operators')
    @title('Where - Task 3')
    @description('This sample finds all customers from London.')
    def query3(self):
        customers = [c for c in self.data_source.customers if c.city == 'London']

        for c in customers:
            self.dump(c)

    @category('Aggregate Operators')
    @title('Turnover above X')
    @description('Customers whose total turnover (the sum of all orders) exceeds a certain value X.')
    @linked_method('_turnover')
    def query4(self):
        x = 1000

        customers = [
            SimpleNamespace(id=c.customer_id, total=self._turnover(c))
            for c in self.data_source.customers
            if self._turnover(c) > x
        ]

        for c in customers:
            self.dump(c)

    @category('Join Operators')
    @title('Suppliers in the same city')
    @description('Customers that have a supplier in the same country and city. Nested loops, no join.')
    def query5(self):
        matches = [
            SimpleNamespace(customer_id=c.customer_id, city=c.city, country=c.country)
            for c in self.data_source.customers
            for s in self.data_source.suppliers
            if c.country == s.country and c.city == s.city
        ]

        for m in matches:
            self.dump(m)

    @category('Join Operators')
    @title('Suppliers in the same city (join)')
    @description('Customers that have a supplier in the same country and city. Hash join on (country, city).')
    def query6(self):
        suppliers_by_location = {}
        for s in self.data_source.suppliers:
            suppliers_by_location.setdefault((s.country, s.city), []).append(s)

        matches = [
            SimpleNamespace(customer_id=c.customer_id, city=c.city, country=c.country, supplier=s.supplier_name)
            for c in self.data_source.customers
            for s in suppliers_by_location.get((c.country, c.city), [])
        ]

        for m in matches:
            self.dump(m)

    @category('Restriction Operators')
    @title('Orders above X')
    @description('Customers that have at least one order above X, with their largest order.')
    def query7(self):
        x = 1000

        customers = [
            SimpleNamespace(id=c.customer_id, total=max(o.total for o in c.orders))
            for c in self.data_source.customers
            if any(o.total > x for o in c.orders)
        ]

        for c in customers:
            self.dump(c)

    @category('Projection Operators')
    @title('Customer since')
    @description('Customers with the month and year of their first order.')
    def query8(self):
        customers = [
            SimpleNamespace(id=c.customer_id, since=min(o.order_date for o in c.orders))
            for c in self.data_source.customers
            if c.orders
        ]

        for c in customers:
            self.dump(SimpleNamespace(id=c.id, month=c.since.month, year=c.since.year))

    @category('Ordering Operators')
    @title('Customer since, sorted')
    @description('The previous list sorted by year, month, turnover (largest first) and company name.')
    @linked_method('_turnover')
    def query9(self):
        rows = []
        for c in self.data_source.customers:
            if not c.orders:
                continue
            since = min(o.order_date for o in c.orders)
            rows.append(SimpleNamespace(
                id=c.customer_id,
                name=c.company_name,
                month=since.month,
                year=since.year,
                total=self._turnover(c),
            ))

        rows.sort(key=lambda r: (r.year, r.month, -r.total, r.name))

        for r in rows:
            self.dump(r)

    @category('Restriction Operators')
    @title('Incomplete contact data')
    @description('Customers with a non-numeric postal code, no region, or no area code in the phone number.')
    def query10(self):
        customers = [
            SimpleNamespace(
                customer_id=c.customer_id,
                postal_code=c.postal_code,
                region=c.region,
                phone=c.phone,
            )
            for c in self.data_source.customers
            if c.postal_code is None
            or not c.postal_code.isdigit()
            or not (c.region or '').strip()
            or not c.phone.startswith('(')
        ]

        for c in customers:
            self.dump(c)

    @category('Grouping Operators')
    @title('Products by category and stock')
    @description('Products grouped by category, then by stock availability, each group sorted by price.')
    def query11(self):
        by_category = sorted(self.data_source.products, key=lambda p: p.category)

        groups = []
        for name, products in groupby(by_category, key=lambda p: p.category):
            products = list(products)
            groups.append(SimpleNamespace(
                category=name,
                availability=[
                    SimpleNamespace(
                        in_stock=in_stock,
                        products=sorted((p for p in products if (p.units_in_stock > 0) == in_stock),
                                        key=lambda p: p.unit_price),
                    )
                    for in_stock in (True, False)
                    if any((p.units_in_stock > 0) == in_stock for p in products)
                ],
            ))

        for g in groups:
            self.dump(g, depth=2)

    @category('Grouping Operators')
    @title('Price bands')
    @description('Products grouped into cheap, average price and expensive.')
    def query12(self):
        cheap = 25
        average = 50

        def band(p):
            if p.unit_price < cheap:
                return 'Cheap'
            if p.unit_price < average:
                return 'Average price'
            return 'Expensive'

        groups = {}
        for p in self.data_source.products:
            groups.setdefault(band(p), []).append(p)

        for key, products in groups.items():
            self.dump(key)
            for p in products:
                self.dump(p)

    @category('Aggregate Operators')
    @title('City statistics')
    @description('Average profitability (turnover per customer) and intensity (orders per customer) of each city.')
    @linked_method('_turnover')
    def query13(self):
        cities = {}
        for c in self.data_source.customers:
            cities.setdefault(c.city, []).append(c)

        stats = [
            SimpleNamespace(
                city=city,
                profitability=statistics.mean(self._turnover(c) for c in customers).quantize(Decimal('0.01')),
                intensity=statistics.mean(len(c.orders) for c in customers),
            )
            for city, customers in cities.items()
        ]

        for s in stats:
            self.dump(s)

    @category('Grouping Operators')
    @title('Activity by month')
    @description('Number of orders per calendar month for each customer.')
    @linked_method('_activity')
    def query14(self):
        for c in self.data_source.customers:
            self.dump(SimpleNamespace(
                customer_id=c.customer_id,
                month_stat=self._activity(c, lambda d: SimpleNamespace(month=d.month)),
            ), depth=1)

    @category('Grouping Operators')
    @title('Activity by year')
    @description('Number of orders per year for each customer.')
    @linked_method('_activity')
    def query15(self):
        for c in self.data_source.customers:
            self.dump(SimpleNamespace(
                customer_id=c.customer_id,
                year_stat=self._activity(c, lambda d: SimpleNamespace(year=d.year)),
            ), depth=1)

    @category('Grouping Operators')
    @title('Activity by year and month')
    @description('Number of orders per year and month for each customer.')
    @linked_method('_activity')
    def query16(self):
        for c in self.data_source.customers:
            self.dump(SimpleNamespace(
                customer_id=c.customer_id,
                year_month_stat=self._activity(c, lambda d: SimpleNamespace(year=d.year, month=d.month)),
            ), depth=1)

    @staticmethod
    def _turnover(customer):
        return sum((o.total for o in customer.orders), Decimal(0))

    @staticmethod
    def _activity(customer, key):
        counts = {}
        for o in customer.orders:
            k = tuple(vars(key(o.order_date)).items())
            counts[k] = counts.get(k, 0) + 1
        return [SimpleNamespace(**dict(k), activity=n) for k, n in counts.items()]
