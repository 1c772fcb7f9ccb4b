"""Monthly expense ledger computed from employee salaries."""

from __future__ import annotations

import argparse
import os
import re
from pathlib import Path

from .records import NotFoundError, PathLike, ValidationError, read_lines

EMPLOYEE_FILE = "NhanVien.txt"
EXPENSE_FILE = "ChiPhi.txt"
TEMP_FILE = "TempChiPhi.txt"

_MONTH = re.compile(r"(0[1-9]|1[0-2])/[0-9]{4}")
_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def is_valid_month(month: str) -> bool:
    """Return True when *month* has the form ``mm/yyyy``."""
    return _MONTH.fullmatch(month) is not None


def _parse_amount(text: str) -> float:
    match = _NUMBER.match(text.lstrip())
    if match is None:
        raise ValidationError(f"invalid salary value: {text!r}")
    return float(match.group(0))


class ExpenseLedger:
    """Expense records kept in ``ChiPhi.txt`` inside a directory."""

    def __init__(self, directory: PathLike = ".") -> None:
        self.directory = Path(directory)
        self.employee_path = self.directory / EMPLOYEE_FILE
        self.expense_path = self.directory / EXPENSE_FILE
        self.temp_path = self.directory / TEMP_FILE

    def total_salaries(self) -> float:
        """Sum every ``Luong`` value in the employee file (0.0 if it is missing)."""
        total = 0.0
        for line in read_lines(self.employee_path):
            if "Luong" in line and ":" in line:
                amount = line[line.index(":") + 1:].lstrip(" ")
                total += _parse_amount(amount)
        return total

    def add(self, month: str) -> float:
        """Append the current salary total as the expense of *month*; return it."""
        if not is_valid_month(month):
            raise ValidationError(
                "Thang chi khong hop le! Vui long nhap theo dinh dang mm/yyyy!"
            )
        total = self.total_salaries()
        with open(self.expense_path, "a", encoding="utf-8") as handle:
            handle.write(f"Thang chi: {month}\n")
            handle.write(f"Tien chi: {total:.2f}\n")
            handle.write("\n")
        return total

    def _require_file(self) -> list[str]:
        if not self.expense_path.exists():
            raise FileNotFoundError(f"cannot read {self.expense_path}")
        return read_lines(self.expense_path)

    def find(self, month: str) -> list[str]:
        """Return the first record line mentioning *month* and the line after it."""
        key = f"Thang chi: {month}"
        lines = iter(self._require_file())
        for line in lines:
            if key in line:
                following = next(lines, None)
                return [line] if following is None else [line, following]
        raise NotFoundError(f"Khong tim thay chi phi cho thang {month}")

    def delete(self, month: str) -> None:
        """Remove every record for *month*, rewriting the file in place."""
        key = f"Thang chi: {month}"
        lines = iter(self._require_file())
        kept: list[str] = []
        found = False
        for line in lines:
            if key in line:
                found = True
                next(lines, None)
            else:
                kept.append(line)
        with open(self.temp_path, "w", encoding="utf-8") as handle:
            handle.writelines(f"{line}\n" for line in kept)
        os.replace(self.temp_path, self.expense_path)
        if not found:
            raise NotFoundError(f"Khong tim thay chi phi cho thang {month}")

    def show(self) -> list[str]:
        """Return every line of the expense file."""
        return self._require_file()


def _prompt(text: str) -> str:
    try:
        return input(text)
    except EOFError:
        return ""


def main(argv: list[str] | None = None) -> int:
    """Run one pass of the expense menu."""
    parser = argparse.ArgumentParser(description="Quan li chi phi")
    parser.add_argument("-d", "--directory", default=".")
    args = parser.parse_args(argv)
    ledger = ExpenseLedger(args.directory)

    print("Quan li chi phi")
    print("1. Them chi phi")
    print("2. Tim chi phi")
    print("3. Xoa chi phi")
    print("4. Xem tat ca chi phi")
    print("Nhap bat ki de quay lai")
    choice = _prompt("Nhap lua chon: ")

    try:
        if choice == "1":
            month = _prompt("Nhap Thang chi (mm/yyyy) de them: ")
            ledger.add(month)
            print(f"Them chi phi cho thang {month} thanh cong!\n")
        elif choice == "2":
            month = _prompt("Nhap Thang chi (mm/yyyy) de tim: ")
            for line in ledger.find(month):
                print(line)
        elif choice == "3":
            month = _prompt("Nhap Thang chi (mm/yyyy) de xoa: ")
            ledger.delete(month)
            print(f"Xoa chi phi cho thang {month} thanh cong!\n")
        elif choice == "4":
            lines = ledger.show()
            if not lines:
                print("Chua co chi phi nao!\n")
            for line in lines:
                print(line)
        else:
            print()
    except FileNotFoundError:
        print("Khong the mo file de doc!\n")
    except (ValidationError, NotFoundError) as error:
        print(f"{error}\n")
    return 0