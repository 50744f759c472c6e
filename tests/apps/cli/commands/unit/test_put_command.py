"""
Unit tests for put CLI command.
"""

from pathlib import Path
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from apps.cli.commands import put
from catalog.entities import Product
from catalog.memory import InMemoryCatalogRepository
from catalog.interfaces import IReporter


@pytest.mark.unit
class TestPutCommand:
    """Test put command functionality."""

    def test_command_definition(self) -> None:
        """Test that command definition is properly structured."""
        assert put.DEFINITION["name"] == "put"
        arg_names = [arg["name"] for arg in put.DEFINITION["arguments"]]
        for name in ["id", "name", "description", "price", "file", "refresh"]:
            assert name in arg_names

    @patch("apps.cli.commands.put.open_catalog")
    def test_put_single_product(
        self,
        mock_open_catalog: Any,
        mock_catalog: MagicMock,
        repository: InMemoryCatalogRepository,
        capsys: Any,
    ) -> None:
        """Test storing one product from arguments."""
        mock_open_catalog.return_value = mock_catalog

        put.main(id="p1", name="Blue Mug", description="Stoneware", price=12.5, refresh=True)

        assert repository.get_by_id("p1") == Product(
            id="p1", name="Blue Mug", description="Stoneware", price=12.5
        )
        assert mock_open_catalog.call_args.kwargs["refresh"] is True
        assert "Stored 1 product(s)" in capsys.readouterr().out

    @patch("apps.cli.commands.put.open_catalog")
    def test_put_from_file(
        self,
        mock_open_catalog: Any,
        mock_catalog: MagicMock,
        repository: InMemoryCatalogRepository,
        tmp_path: Path,
    ) -> None:
        """Test storing every product of a JSON-lines file."""
        mock_open_catalog.return_value = mock_catalog
        file = tmp_path / "products.jsonl"
        file.write_text(
            '{"id": "p3", "name": "Kettle", "description": "Steel", "price": 25}\n'
            "\n"
            '{"id": "p4", "name": "Cup"}\n',
            encoding="utf-8",
        )

        put.main(file=file)

        assert repository.get_by_id("p3").name == "Kettle"
        assert repository.get_by_id("p4").price == 0.0

    def test_requires_id_or_file(self, capsys: Any) -> None:
        """Test that exactly one of --id and --file is needed."""
        with pytest.raises(SystemExit) as exc_info:
            put.main()

        assert exc_info.value.code == 1
        assert "Error: Pass either --id or --file" in capsys.readouterr().err

    @patch("apps.cli.commands.put.open_catalog")
    def test_invalid_file_line(self, mock_open_catalog: Any, tmp_path: Path, capsys: Any) -> None:
        """Test that an invalid line aborts before connecting."""
        file = tmp_path / "products.jsonl"
        file.write_text('{"name": "no id"}\n', encoding="utf-8")

        with pytest.raises(SystemExit):
            put.main(file=file)

        assert "products.jsonl:1: invalid product" in capsys.readouterr().err
        mock_open_catalog.assert_not_called()

    def test_put_products_reports_progress(self) -> None:
        """Test that put_products reports one step per product."""
        repository = InMemoryCatalogRepository()
        reporter = MagicMock(spec=IReporter)
        products = [Product(id="a"), Product(id="b")]

        put.put_products(products=products, repository=repository, reporter=reporter)

        reporter.start_progress.assert_called_once_with(2)
        assert reporter.on_progress.call_count == 2
        reporter.stop_progress.assert_called_once()
        assert len(repository.list()) == 2
