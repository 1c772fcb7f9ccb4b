import pytest

from cinemadesk.records import DuplicateError, NotFoundError, ValidationError
from cinemadesk.services import (
    Service,
    ServiceCatalog,
    format_service,
    is_valid_price,
    main,
)


@pytest.fixture
def catalog(tmp_path):
    return ServiceCatalog(tmp_path)


@pytest.mark.parametrize("price", ["0", "1", "25000", "2147483647"])
def test_valid_prices(price):
    assert is_valid_price(price) is True


@pytest.mark.parametrize(
    "price", ["", "01", "00", "-5", "12a", "1.5", " 10", "2147483648"]
)
def test_invalid_prices(price):
    assert is_valid_price(price) is False


def test_format_service():
    text = format_service(Service("Bap rang", "CGV", "50000"))
    assert text == (
        "Ten dich vu  : Bap rang\n"
        "Nha cung cap : CGV\n"
        "Gia dich vu  : 50000\n"
    )


def test_add_writes_file(tmp_path, catalog):
    catalog.add("Bap rang", "CGV", "50000")
    assert catalog.services == [Service("Bap rang", "CGV", "50000")]
    content = (tmp_path / "DichVu.txt").read_text(encoding="utf-8")
    assert content == (
        "Ten dich vu  : Bap rang\n"
        "Nha cung cap : CGV\n"
        "Gia dich vu  : 50000\n"
        "\n"
    )


def test_round_trip(tmp_path, catalog):
    catalog.add("Bap rang", "CGV", "50000")
    catalog.add("Nuoc ngot", "Pepsi", "20000")
    reloaded = ServiceCatalog(tmp_path)
    assert reloaded.services == [
        Service("Bap rang", "CGV", "50000"),
        Service("Nuoc ngot", "Pepsi", "20000"),
    ]


def test_add_invalid_price(catalog):
    with pytest.raises(ValidationError):
        catalog.add("Bap rang", "CGV", "05")
    assert catalog.services == []


def test_add_duplicate(catalog):
    catalog.add("Bap rang", "CGV", "50000")
    with pytest.raises(DuplicateError):
        catalog.add("Bap rang", "Other", "1")
    assert len(catalog.services) == 1


def test_delete(tmp_path, catalog):
    catalog.add("Bap rang", "CGV", "50000")
    catalog.add("Nuoc ngot", "Pepsi", "20000")
    catalog.delete("Bap rang")
    assert ServiceCatalog(tmp_path).services == [Service("Nuoc ngot", "Pepsi", "20000")]


def test_delete_missing(catalog):
    with pytest.raises(NotFoundError):
        catalog.delete("Khong co")


def test_edit_same_name(tmp_path, catalog):
    catalog.add("Bap rang", "CGV", "50000")
    result = catalog.edit("Bap rang", "Bap rang", "Lotte", "60000")
    assert result == Service("Bap rang", "Lotte", "60000")
    assert ServiceCatalog(tmp_path).services == [result]


def test_edit_rename(catalog):
    catalog.add("Bap rang", "CGV", "50000")
    catalog.edit("Bap rang", "Bap pho mai", "CGV", "55000")
    assert catalog.services == [Service("Bap pho mai", "CGV", "55000")]


def test_edit_to_existing_name(catalog):
    catalog.add("Bap rang", "CGV", "50000")
    catalog.add("Nuoc ngot", "Pepsi", "20000")
    with pytest.raises(DuplicateError):
        catalog.edit("Bap rang", "Nuoc ngot", "CGV", "1")
    assert catalog.services[0] == Service("Bap rang", "CGV", "50000")


def test_edit_invalid_price(catalog):
    catalog.add("Bap rang", "CGV", "50000")
    with pytest.raises(ValidationError):
        catalog.edit("Bap rang", "Bap rang", "CGV", "abc")


def test_edit_missing(catalog):
    with pytest.raises(NotFoundError):
        catalog.edit("Khong co", "Moi", "CGV", "10")


def test_search_matches_any_field(catalog):
    catalog.add("Bap rang", "CGV", "50000")
    catalog.add("Nuoc ngot", "CGV", "20000")
    catalog.add("Keo", "Lotte", "20000")
    assert [s.name for s in catalog.search("CGV")] == ["Bap rang", "Nuoc ngot"]
    assert [s.name for s in catalog.search("20000")] == ["Nuoc ngot", "Keo"]
    assert [s.name for s in catalog.search("Keo")] == ["Keo"]
    assert catalog.search("nothing") == []


def test_load_skips_blank_lines(tmp_path):
    (tmp_path / "DichVu.txt").write_text(
        "\n\nTen dich vu  : Keo\nNha cung cap : Lotte\nGia dich vu  : 10\n\n\n",
        encoding="utf-8",
    )
    assert ServiceCatalog(tmp_path).services == [Service("Keo", "Lotte", "10")]


def test_main_add_and_show(tmp_path, monkeypatch, capsys):
    answers = iter(["2", "Keo", "Lotte", "10"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert main(["-d", str(tmp_path)]) == 0
    assert "Da them thanh cong dich vu." in capsys.readouterr().out

    answers = iter(["5"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    main(["-d", str(tmp_path)])
    assert "Ten dich vu  : Keo" in capsys.readouterr().out


def test_main_show_empty(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "5")
    main(["-d", str(tmp_path)])
    assert "Danh sach dich vu rong!" in capsys.readouterr().out


def test_main_reports_invalid_price(tmp_path, monkeypatch, capsys):
    answers = iter(["2", "Keo", "Lotte", "x"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    main(["-d", str(tmp_path)])
    assert "Sai dinh dang gia dich vu." in capsys.readouterr().out
    assert not (tmp_path / "DichVu.txt").exists()