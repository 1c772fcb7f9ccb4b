# cinemadesk

Record keeping for a small cinema. All data is kept in plain, human-readable
text files inside one directory. The package covers three desks:

- **Expenses** (`cinemadesk.expenses`): the expense of a month is the sum of
  every `Luong` (salary) value found in `NhanVien.txt`; it is appended to
  `ChiPhi.txt` as a `Thang chi:` / `Tien chi:` pair with two decimals.
- **Reviews** (`cinemadesk.reviews`): customer star ratings (`1` to `5`) with
  feedback, stored in `DanhGia.txt`. A review may only be written for a phone
  number listed on a `So DT:` line of `KhachHang.txt`, and each customer has
  at most one review.
- **Services** (`cinemadesk.services`): the catalogue of extra services
  (name, provider, price), stored in `DichVu.txt`. Names are unique; prices
  are whole, non-negative numbers without leading zeros.

Each file is a series of blocks of `Label: value` lines, each block followed
by a blank line, so the files can be read and edited by hand.

## Installation

```
pip install .
```

No third-party libraries are needed.

## Command line

Each desk has its own command. It shows a menu, reads the choice and any
values from standard input, performs one action, prints the outcome and
returns. Any other choice simply returns.

```
cinemadesk-expenses
cinemadesk-reviews
cinemadesk-services
```

All three take `-d DIRECTORY` / `--directory DIRECTORY` to use data files in
another directory than the current one.

- `cinemadesk-expenses`: add the expense for a month (`mm/yyyy`), look one
  up, delete one, or list the whole expense file.
- `cinemadesk-reviews`: search, add, delete, edit or list reviews; the
  listing ends with the average star rating.
- `cinemadesk-services`: search, add, delete, edit or list services.

## Library use

Each class is given the directory that holds its data files (default `.`).

```python
from cinemadesk.expenses import ExpenseLedger, is_valid_month
from cinemadesk.services import ServiceCatalog, is_valid_price, format_service
from cinemadesk.reviews import ReviewBook, is_valid_stars, format_review

catalog = ServiceCatalog("data")
catalog.add("Popcorn", "Snack Bar", "45000")
catalog.edit("Popcorn", "Large popcorn", "Snack Bar", "60000")
for service in catalog.search("Snack Bar"):
    print(format_service(service))

ledger = ExpenseLedger("data")
ledger.add("03/2025")          # returns the salary total that was recorded
print(ledger.find("03/2025"))  # ['Thang chi: 03/2025', 'Tien chi: ...']

book = ReviewBook("data")
print(book.average_stars())    # None when there is nothing to average

is_valid_month("13/2025")   # False
is_valid_price("007")       # False
is_valid_stars("5")         # True
```

- `ServiceCatalog` has `add`, `delete`, `edit`, `search` and a `services`
  list; entries are frozen `Service` records with `name`, `provider` and
  `price`.
- `ReviewBook` has `add`, `delete`, `edit`, `search`, `customer_exists`,
  `average_stars` and a `reviews` list of `Review` records with `phone`,
  `stars` and `feedback`.
- `ExpenseLedger` has `total_salaries`, `add`, `find`, `delete` and `show`.
  `add` does not check for an existing entry of the same month; `delete`
  removes every entry of that month. `find`, `delete` and `show` raise
  `FileNotFoundError` when `ChiPhi.txt` does not exist yet.

Changes to services and reviews are written to disk at once.

Invalid input, a missing record or a duplicate key is reported by raising an
exception from `cinemadesk.records`: `ValidationError`, `NotFoundError` or
`DuplicateError`, all subclasses of `RecordError`. The same module offers the
small file helpers `field_value`, `read_lines` and `write_blocks`.

## What it does not do

The package reads `NhanVien.txt` (employees) and `KhachHang.txt` (customers)
but has no commands or classes to create or edit them; they must be prepared
by hand or by other tools. There is no single combined menu: each desk is its
own command, and each command performs one action per run.

## Running the tests

```
pip install .[test]
pytest
```