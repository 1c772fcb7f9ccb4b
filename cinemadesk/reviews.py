"""Customer reviews kept in ``DanhGia.txt``."""

from __future__ import annotations

import argparse
import dataclasses
import re
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

REVIEW_FILE = "DanhGia.txt"
CUSTOMER_FILE = "KhachHang.txt"

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


@dataclass(frozen=True)
class Review:
    """One customer's review."""

    phone: str = ""
    stars: str = ""
    feedback: str = ""


def is_valid_stars(stars: str) -> bool:
    """Return True when *stars* is a single character from ``1`` to ``5``."""
    return len(stars) == 1 and "1" <= stars <= "5"


def format_review(review: Review) -> str:
    """Render a review the way it is shown on screen."""
    return (
        f"So DT     : {review.phone}\n"
        f"So sao    : {review.stars}\n"
        f"Phan hoi  : {review.feedback}\n"
    )


def _star_count(stars: str) -> int | None:
    match = _LEADING_INT.match(stars)
    if match is None:
        return None
    value = int(match.group(1))
    return value if _INT_MIN <= value <= _INT_MAX else None


class ReviewBook:
    """The list of reviews, loaded from and saved to a directory."""

    def __init__(self, directory: PathLike = ".") -> None:
        self.directory = Path(directory)
        self.review_path = self.directory / REVIEW_FILE
        self.customer_path = self.directory / CUSTOMER_FILE
        self._reviews: list[Review] = list(self._load())

    @property
    def reviews(self) -> list[Review]:
        return list(self._reviews)

    def _load(self):
        lines = iter(read_lines(self.review_path))
        for line in lines:
            if not line:
                continue
            phone = field_value(line) if "So DT:" in line else ""
            line = next(lines, "")
            stars = field_value(line) if "So sao:" in line else ""
            line = next(lines, "")
            feedback = field_value(line) if "Phan hoi:" in line else ""
            yield Review(phone, stars, feedback)
            next(lines, None)

    def _save(self) -> None:
        write_blocks(
            self.review_path,
            (
                [f"So DT: {r.phone}", f"So sao: {r.stars}", f"Phan hoi: {r.feedback}"]
                for r in self._reviews
            ),
        )

    def _index(self, phone: str) -> int | None:
        return next((i for i, r in enumerate(self._reviews) if r.phone == phone), None)

    def customer_exists(self, phone: str) -> bool:
        """Return True when the customer file lists *phone*."""
        return any(
            "So DT:" in line and field_value(line) == phone
            for line in read_lines(self.customer_path)
        )

    def add(self, phone: str, stars: str, feedback: str) -> Review:
        """Add a review for an existing customer who has none yet."""
        if not is_valid_stars(stars):
            raise ValidationError("So sao khong hop le. Vui long chon so sao tu 1 den 5.")
        if not self.customer_exists(phone):
            raise NotFoundError("Khach hang voi so dien thoai nay khong ton tai!")
        if self._index(phone) is not None:
            raise DuplicateError("Danh gia cua khach hang nay da ton tai!")
        review = Review(phone, stars, feedback)
        self._reviews.append(review)
        self._save()
        return review

    def delete(self, phone: str) -> None:
        """Remove the review of *phone*."""
        index = self._index(phone)
        if index is None:
            raise NotFoundError("Khong tim thay danh gia cua khach hang.")
        del self._reviews[index]
        self._save()

    def edit(self, old_phone: str, new_phone: str, stars: str, feedback: str) -> Review:
        """Replace the review of *old_phone*, possibly moving it to *new_phone*."""
        if not is_valid_stars(stars):
            raise ValidationError("So sao khong hop le. Vui long chon so sao tu 1 den 5.")
        index = self._index(old_phone)
        if index is None:
            raise NotFoundError("Khong tim thay danh gia cua khach hang voi so DT cu!")
        if not self.customer_exists(new_phone):
            raise NotFoundError("Khach hang voi so dien thoai moi khong ton tai!")
        if old_phone != new_phone and self._index(new_phone) is not None:
            raise DuplicateError("So dien thoai moi da ton tai trong danh sach danh gia!")
        review = dataclasses.replace(
            self._reviews[index], phone=new_phone, stars=stars, feedback=feedback
        )
        self._reviews[index] = review
        self._save()
        return review

    def search(self, query: str) -> list[Review]:
        """Return every review with a field equal to *query*."""
        return [
            r for r in self._reviews if query in (r.phone, r.stars, r.feedback)
        ]

    def average_stars(self) -> float | None:
        """Average of the readable star counts, or None when there are none."""
        counts = [
            count
            for r in self._reviews
            if r.stars and (count := _star_count(r.stars)) is not None
        ]
        if not counts:
            return None
        return sum(counts) / len(counts)


def _prompt(text: str) -> str:
    try:
        return input(text)
    except EOFError:
        return ""


def main(argv: list[str] | None = None) -> int:
    """Run one pass of the review menu."""
    parser = argparse.ArgumentParser(description="Quan ly danh gia")
    parser.add_argument("-d", "--directory", default=".")
    args = parser.parse_args(argv)
    book = ReviewBook(args.directory)

    print("Quan ly danh gia")
    print("1. Tim danh gia\n2. Them danh gia\n3. Xoa danh gia\n4. Sua danh gia\n"
          "5. Xem danh gia\nNhap bat ky de quay lai")
    choice = _prompt("Chon chuc nang: ")

    try:
        if choice == "1":
            query = _prompt("Tim danh gia theo (so DT/so sao/phan hoi): ")
            found = book.search(query)
            if not found:
                print("Khong tim thay danh gia.\n")
            for review in found:
                print(format_review(review))
        elif choice == "2":
            phone = _prompt("Them so DT: ")
            stars = _prompt("Them so sao (1-5): ")
            feedback = _prompt("Them phan hoi: ")
            book.add(phone, stars, feedback)
            print("Da them danh gia thanh cong!\n")
        elif choice == "3":
            book.delete(_prompt("Nhap so DT danh gia can xoa: "))
            print("Da xoa danh gia thanh cong!\n")
        elif choice == "4":
            phone = _prompt("Nhap so DT danh gia can sua: ")
            new_phone = _prompt("Nhap so DT moi: ")
            stars = _prompt("Nhap so sao moi (1-5): ")
            feedback = _prompt("Nhap phan hoi moi: ")
            book.edit(phone, new_phone, stars, feedback)
            print("Da sua danh gia thanh cong!\n")
        elif choice == "5":
            if not book.reviews:
                print("Danh sach danh gia rong!\n")
            else:
                for review in book.reviews:
                    print(format_review(review))
                average = book.average_stars()
                if average is not None:
                    print(f"So sao trung binh: {average:g}\n")
        else:
            print()
    except (ValidationError, NotFoundError, DuplicateError) as error:
        print(f"{error}\n")
    return 0