"""Cinema services (snacks, drinks and the like) kept in ``DichVu.txt``."""

from __future__ import annotations

import argparse
import dataclasses
from dataclasses import dataclass
from pathlib import Path

from .records import (
    DuplicateError,
    NotFoundError,
    PathLike,
    ValidationError,
    field_value,
    read_lines,
    write_blocks,
)

SERVICE_FILE = "DichVu.txt"

_DIGITS = frozenset("0123456789")
_INT_MAX = 2**31 - 1


@dataclass(frozen=True)
class Service:
    """One service offered by the cinema."""

    name: str = ""
    provider: str = ""
    price: str = ""


def is_valid_price(price: str) -> bool:
    """Return True when *price* is a non-negative integer without leading zeros."""
    if not price:
        return False
    if price[0] == "0" and len(price) > 1:
        return False
    if not set(price) <= _DIGITS:
        return False
    return int(price) <= _INT_MAX


def format_service(service: Service) -> str:
    """Render a service the way it is shown on screen and stored on disk."""
    return (
        f"Ten dich vu  : {service.name}\n"
        f"Nha cung cap : {service.provider}\n"
        f"Gia dich vu  : {service.price}\n"
    )


class ServiceCatalog:
    """The list of services, loaded from and saved to a directory."""

    def __init__(self, directory: PathLike = ".") -> None:
        self.directory = Path(directory)
        self.service_path = self.directory / SERVICE_FILE
        self._services: list[Service] = list(self._load())

    @property
    def services(self) -> list[Service]:
        return list(self._services)

    def _load(self):
        lines = iter(read_lines(self.service_path))
        for line in lines:
            if not line:
                continue
            name = field_value(line)
            provider = field_value(next(lines, ""))
            price = field_value(next(lines, ""))
            yield Service(name, provider, price)

    def _save(self) -> None:
        write_blocks(
            self.service_path,
            (format_service(s).splitlines() for s in self._services),
        )

    def _index(self, name: str) -> int | None:
        return next((i for i, s in enumerate(self._services) if s.name == name), None)

    def add(self, name: str, provider: str, price: str) -> Service:
        """Add a service whose name is not yet taken."""
        if not is_valid_price(price):
            raise ValidationError("Sai dinh dang gia dich vu.")
        if self._index(name) is not None:
            raise DuplicateError("Dich vu da ton tai.")
        service = Service(name, provider, price)
        self._services.append(service)
        self._save()
        return service

    def delete(self, name: str) -> None:
        """Remove the service called *name*."""
        index = self._index(name)
        if index is None:
            raise NotFoundError("Khong tim thay dich vu.")
        del self._services[index]
        self._save()

    def edit(self, old_name: str, new_name: str, provider: str, price: str) -> Service:
        """Replace the service *old_name* with new details."""
        if not is_valid_price(price):
            raise ValidationError("Sai dinh dang gia dich vu.")
        if new_name != old_name and self._index(new_name) is not None:
            raise DuplicateError("Dich vu moi da ton tai. Khong the sua.")
        index = self._index(old_name)
        if index is None:
            raise NotFoundError("Khong tim thay dich vu.")
        service = dataclasses.replace(
            self._services[index], name=new_name, provider=provider, price=price
        )
        self._services[index] = service
        self._save()
        return service

    def search(self, query: str) -> list[Service]:
        """Return every service with a field equal to *query*."""
        return [s for s in self._services if query in (s.name, s.provider, s.price)]


def _prompt(text: str) -> str:
    try:
        return input(text)
    except EOFError:
        return ""


def main(argv: list[str] | None = None) -> int:
    """Run one pass of the service menu."""
    parser = argparse.ArgumentParser(description="Quan li dich vu")
    parser.add_argument("-d", "--directory", default=".")
    args = parser.parse_args(argv)
    catalog = ServiceCatalog(args.directory)

    print("Quan li dich vu")
    print("1. Tim dich vu\n2. Them dich vu\n3. Xoa dich vu\n4. Sua dich vu\n"
          "5. Xem dich vu\nNhap bat ky de quay lai")
    choice = _prompt("Chon chuc nang: ")

    try:
        if choice == "1":
            query = _prompt("Tim dich vu theo (TenDichVu/NhaCungCap/Gia): ")
            found = catalog.search(query)
            if not found:
                print("Khong tim thay dich vu.\n")
            for service in found:
                print(format_service(service))
        elif choice == "2":
            name = _prompt("Nhap ten dich vu: ")
            provider = _prompt("Nhap nha cung cap: ")
            price = _prompt("Nhap gia dich vu: ")
            catalog.add(name, provider, price)
            print("Da them thanh cong dich vu.\n")
        elif choice == "3":
            catalog.delete(_prompt("Nhap ten dich vu muon xoa: "))
            print("Da xoa dich vu thanh cong.\n")
        elif choice == "4":
            old_name = _prompt("Nhap ten dich vu cu muon sua: ")
            new_name = _prompt("Nhap ten dich vu moi: ")
            provider = _prompt("Nhap nha cung cap moi: ")
            price = _prompt("Nhap gia moi: ")
            catalog.edit(old_name, new_name, provider, price)
            print("Da sua thanh cong dich vu.\n")
        elif choice == "5":
            if not catalog.services:
                print("Danh sach dich vu rong!\n")
            for service in catalog.services:
                print(format_service(service))
        else:
            print()
    except (ValidationError, NotFoundError, DuplicateError) as error:
        print(f"{error}\n")
    return 0