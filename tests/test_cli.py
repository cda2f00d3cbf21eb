"""Tests for the command line entry point."""

import json
from datetime import date, timedelta

import pytest

from meatmart.cli import main, open_inventory
from meatmart.config import MeatMartConfig
from meatmart.errors import PersistenceError


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch):
    """Keep main() from reconfiguring the root logger during tests."""
    monkeypatch.setattr("meatmart.cli.setup_logging", lambda config: None)


@pytest.fixture
def inventory_file(tmp_path):
    soon = (date.today() + timedelta(days=1)).isoformat()
    later = (date.today() + timedelta(days=30)).isoformat()
    path = tmp_path / "inventory.txt"
    path.write_text(
        f"Chicken,205.00,8,{soon}\nBeef,280.00,9,{later}\n", encoding="utf-8"
    )
    return path


def test_open_inventory_seeds_empty_store(tmp_path):
    """A missing inventory file starts with the default stock."""
    config = MeatMartConfig()
    config.inventory.path = str(tmp_path / "inventory.txt")
    inventory = open_inventory(config)
    assert [i.name for i in inventory.list()] == ["Chicken", "Beef"]
    assert (tmp_path / "inventory.txt").exists()


def test_open_inventory_without_seed(tmp_path):
    config = MeatMartConfig()
    config.inventory.path = str(tmp_path / "inventory.txt")
    config.inventory.seed_defaults = False
    assert len(open_inventory(config)) == 0


def test_open_inventory_keeps_file_contents(inventory_file):
    config = MeatMartConfig()
    config.inventory.path = str(inventory_file)
    inventory = open_inventory(config)
    assert inventory.get("Chicken").quantity == 8
    assert len(inventory) == 2


def test_items_json(inventory_file, capsys):
    main(["--inventory", str(inventory_file), "items", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert [d["name"] for d in data] == ["Chicken", "Beef"]
    assert data[0]["price"] == "205.00"
    assert data[1]["quantity"] == 9


def test_items_text(inventory_file, capsys):
    main(["--inventory", str(inventory_file), "items"])
    out = capsys.readouterr().out
    assert "Name: Chicken" in out
    assert "Price (per kilo): ₱280.00" in out


def test_expiring(inventory_file, capsys):
    main(["--inventory", str(inventory_file), "expiring", "--days", "2"])
    out = capsys.readouterr().out
    assert "Chicken" in out
    assert "Beef" not in out


def test_expiring_json_none(inventory_file, capsys):
    main(["--inventory", str(inventory_file), "expiring", "--days", "0", "--json"])
    assert json.loads(capsys.readouterr().out) == []


def test_shell_exits_zero(inventory_file, monkeypatch, capsys):
    """The default command runs the shell and exits cleanly."""
    monkeypatch.setattr("builtins.input", lambda prompt="": "Q")
    with pytest.raises(SystemExit) as exc_info:
        main(["--inventory", str(inventory_file)])
    assert exc_info.value.code == 0
    assert "Inventory saved to file." in capsys.readouterr().out


def test_open_inventory_skips_undecodable_line(tmp_path):
    """A bad line is dropped; the file is neither seeded nor rewritten."""
    path = tmp_path / "inventory.txt"
    original = (
        b"Pork,250.00,4,2026-11-01\n"
        b"Lamb,450.00,2,2026-11-02\n"
        b"Caf\xe9,10,1,2026-11-03\n"
    )
    path.write_bytes(original)
    config = MeatMartConfig()
    config.inventory.path = str(path)
    inventory = open_inventory(config)
    assert [i.name for i in inventory.list()] == ["Pork", "Lamb"]
    assert path.read_bytes() == original


def test_open_inventory_does_not_seed_existing_file(tmp_path):
    """An existing file whose lines all fail to parse is left alone."""
    path = tmp_path / "inventory.txt"
    path.write_text("Pork;250.00;4;2026-11-01\n", encoding="utf-8")
    config = MeatMartConfig()
    config.inventory.path = str(path)
    inventory = open_inventory(config)
    assert len(inventory) == 0
    assert path.read_text(encoding="utf-8") == "Pork;250.00;4;2026-11-01\n"


def test_open_inventory_reads_month_day_year_dates(tmp_path):
    path = tmp_path / "inventory.txt"
    path.write_text("Pork,250.00,4,10/24/2026 12:00:00 AM\n", encoding="utf-8")
    config = MeatMartConfig()
    config.inventory.path = str(path)
    inventory = open_inventory(config)
    assert [i.name for i in inventory.list()] == ["Pork"]
    assert inventory.get("Pork").expiration_date == date(2026, 10, 24)


def test_open_inventory_unreadable_file(tmp_path):
    path = tmp_path / "inventory.txt"
    path.mkdir()
    config = MeatMartConfig()
    config.inventory.path = str(path)
    with pytest.raises(PersistenceError, match="leaving it untouched"):
        open_inventory(config)


def test_main_exits_when_inventory_unreadable(tmp_path, capsys):
    path = tmp_path / "inventory.txt"
    path.mkdir()
    with pytest.raises(SystemExit) as exc_info:
        main(["--inventory", str(path)])
    assert exc_info.value.code == 1
    assert "Error: Cannot read inventory file" in capsys.readouterr().err
    assert path.is_dir()


def test_main_exits_on_invalid_seed(tmp_path, capsys):
    config_file = tmp_path / "meatmart.toml"
    config_file.write_text(
        '[[inventory.seed]]\nname = "Pork"\nprice = "cheap"\n', encoding="utf-8"
    )
    with pytest.raises(SystemExit) as exc_info:
        main([
            "--config", str(config_file),
            "--inventory", str(tmp_path / "inventory.txt"),
        ])
    assert exc_info.value.code == 1
    assert "Error: Invalid price" in capsys.readouterr().err


def test_items_does_not_create_file(tmp_path, capsys):
    """Listing a missing inventory neither seeds nor writes it."""
    path = tmp_path / "inventory.txt"
    main(["--inventory", str(path), "items", "--json"])
    assert json.loads(capsys.readouterr().out) == []
    assert not path.exists()


def test_read_commands_leave_file_unchanged(inventory_file, capsys):
    before = inventory_file.read_bytes()
    main(["--inventory", str(inventory_file), "items"])
    main(["--inventory", str(inventory_file), "expiring", "--days", "2"])
    assert inventory_file.read_bytes() == before
