"""Unit tests for match exporters and the export pipeline."""
import csv
import json

import pytest
from openpyxl import load_workbook

from sheetmatch.csv_exporter import CSVExporter
from sheetmatch.excel_exporter import ExcelExporter
from sheetmatch.export_pipeline import ExportPipeline
from sheetmatch.json_exporter import JSONExporter
from sheetmatch.match_pipeline import MatchPipeline
from sheetmatch.matcher import ColumnPairMatcher
from sheetmatch.models import MatchRequest, TabularDataset

FULL_HEADER = ['Row1', 'Name', 'City', 'Row2', 'Full Name', 'Home Town',
               'Match_Col1', 'Match_Col2', 'Match_Type']


@pytest.fixture
def groups(people, customers):
    return ColumnPairMatcher(use_fuzzy=True, threshold=20).match(people, customers)


class TestCombinedTable:
    """Tests for the shared row-joining logic in Exporter."""

    def test_header_and_rows(self, tmp_path, groups, people, customers):
        table = CSVExporter(tmp_path).build_table(groups, people, customers)

        assert table[0] == FULL_HEADER
        assert table[1] == [2, 'Jon Smith', 'Boston', 2, 'John Smith', 'boston',
                            'Name', 'Full Name', 'Fuzzy']
        assert table[2] == [3, 'Alice', 'Denver', 3, 'alice', 'Dallas',
                            'Name', 'Full Name', 'Exact']
        assert len(table) == 1 + 5

    def test_ignored_columns_are_dropped(self, tmp_path, groups, people, customers):
        table = CSVExporter(tmp_path).build_table(groups, people, customers,
                                                  ignore_a=[1], ignore_b=[0])

        assert table[0] == ['Row1', 'Name', 'Row2', 'Home Town',
                            'Match_Col1', 'Match_Col2', 'Match_Type']
        assert table[1] == [2, 'Jon Smith', 2, 'boston', 'Name', 'Full Name', 'Fuzzy']

    def test_ragged_rows_contribute_only_their_cells(self, tmp_path):
        dataset_a = TabularDataset.from_lists("a", ["k", "extra"], [["x"]])
        dataset_b = TabularDataset.from_lists("b", ["k"], [["X"]])
        groups = ColumnPairMatcher().match(dataset_a, dataset_b)

        table = CSVExporter(tmp_path).build_table(groups, dataset_a, dataset_b)

        assert table[1] == [2, 'x', 2, 'X', 'k', 'k', 'Exact']

    def test_no_groups_gives_empty_table(self, tmp_path, people, customers):
        assert CSVExporter(tmp_path).build_table([], people, customers) == []


class TestExcelExporter:
    """Tests for ExcelExporter."""

    def test_writes_workbook(self, tmp_path, groups, people, customers):
        path = ExcelExporter(tmp_path).export(groups, people, customers, "out.xlsx",
                                              sheet_name="All Matches Combined")

        ws = load_workbook(path).active
        assert ws.title == "All Matches Combined"
        assert [c.value for c in ws[1]] == FULL_HEADER
        assert [c.value for c in ws[2]][:3] == [2, 'Jon Smith', 'Boston']
        assert ws[2][8].value == 'Fuzzy'
        assert ws.max_row == 6
        assert ws.freeze_panes == 'A2'

    def test_no_rows_returns_none(self, tmp_path, people, customers):
        assert ExcelExporter(tmp_path).export([], people, customers, "out.xlsx") is None
        assert not (tmp_path / "out.xlsx").exists()


class TestCSVExporter:
    """Tests for CSVExporter."""

    def test_writes_csv(self, tmp_path, groups, people, customers):
        path = CSVExporter(tmp_path).export(groups, people, customers, "out.csv")

        with open(path, newline='', encoding='utf-8') as f:
            rows = list(csv.reader(f))

        assert rows[0] == FULL_HEADER
        assert rows[1][0] == '2'
        assert [r[-1] for r in rows[1:]] == ['Fuzzy', 'Exact', 'Exact', 'Exact', 'Exact']


class TestJSONExporter:
    """Tests for JSONExporter."""

    def test_writes_wire_shaped_groups(self, tmp_path, groups, people, customers):
        path = JSONExporter(tmp_path).export(groups, people, customers, "out.json")

        data = json.loads(path.read_text(encoding='utf-8'))
        assert data == [g.to_dict() for g in groups]
        assert data[0]['matches'][0]['isFuzzy'] is True


class TestExportPipeline:
    """Tests for ExportPipeline."""

    def test_export_all_uses_combined_defaults(self, tmp_path, groups, people, customers):
        pipeline = ExportPipeline(tmp_path)

        path = pipeline.export_all(groups, people, customers)

        assert path.name == "EDM_All_Matches_Combined.xlsx"
        assert load_workbook(path).active.title == "All Matches Combined"
        assert pipeline.get_export_stats()['total_records'] == 5
        assert pipeline.get_export_stats()['fuzzy_records'] == 1

    def test_export_group_names_file_after_headers(self, tmp_path, groups, people, customers):
        path = ExportPipeline(tmp_path).export_group(groups, 0, people, customers)

        assert path.name == "Match_Group_Export_Name-Full_Name.xlsx"
        ws = load_workbook(path).active
        assert ws.title == "Results"
        assert ws.max_row == 1 + 3

    def test_export_group_csv(self, tmp_path, groups, people, customers):
        path = ExportPipeline(tmp_path).export_group(groups, 1, people, customers, format='csv')

        assert path.name == "Match_Group_Export_City-Home_Town.csv"

    def test_export_group_out_of_range(self, tmp_path, groups, people, customers):
        with pytest.raises(IndexError):
            ExportPipeline(tmp_path).export_group(groups, 5, people, customers)

    def test_unknown_format(self, tmp_path, groups, people, customers):
        with pytest.raises(ValueError):
            ExportPipeline(tmp_path).export_all(groups, people, customers, format='xml')

    def test_nothing_to_export(self, tmp_path, people, customers):
        pipeline = ExportPipeline(tmp_path)

        assert pipeline.export_all([], people, customers) is None
        assert pipeline.get_export_stats()['export_count'] == 0

    def test_export_result_reads_datasets_from_store(self, tmp_path, store):
        result = MatchPipeline(store).run(MatchRequest("people", "customers"))

        path = ExportPipeline(tmp_path).export_result(result, store, format='json',
                                                      filename="result.json")

        assert json.loads(path.read_text(encoding='utf-8')) == [g.to_dict() for g in result.groups]
