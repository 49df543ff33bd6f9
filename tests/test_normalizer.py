"""
Unit tests for the record normalizer.
"""

import datetime as dt
import math

import pandas as pd
import pytest

from severe_dashboard.config import (
    COL_DATE,
    COL_DESCRIPTION,
    COL_INTENSITY_VALUE,
    COL_LATITUDE,
    COL_LONGITUDE,
    COL_MAIN_TYPE,
    COL_QUALITY,
    COL_REGION,
    COL_VERIFIED,
    MAIN_TYPES,
)
from severe_dashboard.data.normalizer import (
    extract_main_type,
    normalize_rows,
    parse_coordinate,
    parse_date,
    parse_events,
    parse_intensity,
    parse_quality,
    split_fields,
)


class TestParseDate:
    def test_valid_date(self):
        assert parse_date("20240115") == dt.date(2024, 1, 15)

    def test_leap_day(self):
        assert parse_date("20240229") == dt.date(2024, 2, 29)

    @pytest.mark.parametrize(
        "value",
        [
            "", None, "2024011", "202401150", "2024-1-1", "abcdefgh", "20231301", "20230229", "2024 115",
            "00010101", "30000101", "16770101", "22620412",
        ],
    )
    def test_invalid_dates_are_absent(self, value):
        assert parse_date(value) is None

    def test_datetime64_range_edges(self):
        assert parse_date("17000101") == dt.date(1700, 1, 1)
        assert parse_date("16770922") == dt.date(1677, 9, 22)
        assert parse_date("22620411") == dt.date(2262, 4, 11)


class TestFieldCoercion:
    def test_coordinate(self):
        assert parse_coordinate("-31.3833") == pytest.approx(-31.3833)
        assert math.isnan(parse_coordinate("not-a-number"))
        assert math.isnan(parse_coordinate(""))

    def test_quality(self):
        assert parse_quality("2") == 2
        assert parse_quality("3 (alta)") == 3
        assert parse_quality("x") is None
        assert parse_quality("") is None

    def test_split_fields_strips_quotes_and_whitespace(self):
        assert split_fields(' "a" , b ,"c, d"') == ["a", "b", "c, d"]

    def test_split_fields_empty_line(self):
        assert split_fields("") == []

    def test_split_fields_unbalanced_quote_falls_back_to_plain_split(self):
        assert split_fields('"Paso, del,Salto,si') == ["Paso", "del", "Salto", "si"]


class TestMainType:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("GRANIZO", "HAIL"),
            ("granizo grande", "HAIL"),
            ("Ráfaga", "GUST"),
            ("RAF", "GUST"),
            ("Tornado", "TORNADO"),
            ("Funnel cloud", "FUNNEL"),
            ("Tromba marina", "WATERSPOUT"),
            ("TRB", "WATERSPOUT"),
            ("Lluvia intensa", "OTHER"),
            ("", "OTHER"),
            (None, "OTHER"),
        ],
    )
    def test_classification(self, text, expected):
        assert extract_main_type(text) == expected

    def test_priority_order_wins_over_text_order(self):
        assert extract_main_type("TORNADO Y GRANIZO") == "HAIL"
        assert extract_main_type("GRANIZO Y TORNADO") == "HAIL"
        assert extract_main_type("tornado con ráfagas") == "GUST"

    def test_always_a_known_code(self):
        for text in ["???", "tor", "fun", "x" * 100, "ráfaga/tornado", "   "]:
            code = extract_main_type(text)
            assert code in MAIN_TYPES
            assert extract_main_type(text) == code


class TestIntensity:
    @pytest.mark.parametrize(
        "text,expected",
        [("2 - 4", 2.0), (">5", 5.0), ("F1", 1.0), ("90 km/h", 90.0), ("~1.5", 1.5)],
    )
    def test_first_number(self, text, expected):
        assert parse_intensity(text) == expected

    @pytest.mark.parametrize("text", ["N/S", "", None, "sin dato"])
    def test_absent(self, text):
        assert parse_intensity(text) is None


class TestParseEvents:
    def test_one_row_per_data_line_in_order(self, events):
        assert len(events) == 6
        assert list(events.index) == list(range(6))
        assert events["Localidad"].tolist() == ["Salto", "Young", "Florida", "Colonia", "Rocha", "Melo"]

    def test_header_names_are_unquoted(self, events):
        assert events.columns[0] == COL_DATE
        assert COL_DESCRIPTION in events.columns

    def test_typed_columns(self, events):
        assert events[COL_DATE].iloc[0] == pd.Timestamp(2024, 1, 15)
        assert pd.isna(events[COL_DATE].iloc[3])
        assert pd.isna(events[COL_DATE].iloc[4])
        assert events[COL_LATITUDE].iloc[0] == pytest.approx(-31.3833)
        assert math.isnan(events[COL_LATITUDE].iloc[3])
        assert events[COL_LONGITUDE].iloc[3] == pytest.approx(-57.84)
        assert events[COL_VERIFIED].tolist() == ["SI", "SI", "NO", "SI", "NO", "SI"]
        assert events[COL_QUALITY].iloc[0] == 1
        assert pd.isna(events[COL_QUALITY].iloc[3])

    def test_derived_columns(self, events):
        assert events[COL_MAIN_TYPE].tolist() == ["HAIL", "GUST", "HAIL", "WATERSPOUT", "FUNNEL", "OTHER"]
        assert events[COL_INTENSITY_VALUE].iloc[:3].tolist() == [2.0, 90.0, 1.0]
        assert math.isnan(events[COL_INTENSITY_VALUE].iloc[3])
        assert events[COL_INTENSITY_VALUE].iloc[4] == 5.0

    def test_quoted_value_with_delimiter_stays_in_column(self, events):
        assert events[COL_DESCRIPTION].iloc[1] == "Árboles caídos, techos dañados"
        assert events[COL_LATITUDE].iloc[1] == pytest.approx(-32.6986)

    def test_short_row_pads_with_empty_strings(self, events):
        assert events[COL_REGION].iloc[5] == ""
        assert events[COL_DESCRIPTION].iloc[5] == ""
        assert math.isnan(events[COL_LONGITUDE].iloc[5])

    def test_header_only_yields_empty_frame(self):
        df = parse_events("Fecha,Departamento\n")
        assert df.empty
        assert list(df.columns) == ["Fecha", "Departamento", COL_MAIN_TYPE, COL_INTENSITY_VALUE]

    @pytest.mark.parametrize("text", ["", "   \n  ", None])
    def test_empty_text_raises(self, text):
        with pytest.raises(ValueError):
            parse_events(text)

    def test_unknown_columns_kept_as_text(self):
        df = parse_events("Fecha,Observador\n20240101,Ana\n")
        assert df["Observador"].tolist() == ["Ana"]
        assert df[COL_MAIN_TYPE].tolist() == ["OTHER"]

    def test_crlf_and_bom(self):
        df = parse_events("\ufeffFecha,Departamento\r\n20240101,Salto\r\n")
        assert df[COL_DATE].iloc[0] == pd.Timestamp(2024, 1, 1)
        assert df["Departamento"].tolist() == ["Salto"]

    def test_out_of_range_date_degrades_only_that_field(self):
        df = parse_events("Fecha,Departamento\n30000101,Salto\n00010101,Florida\n20240101,Rocha\n")
        assert len(df) == 3
        assert pd.isna(df[COL_DATE].iloc[0])
        assert pd.isna(df[COL_DATE].iloc[1])
        assert df[COL_DATE].iloc[2] == pd.Timestamp(2024, 1, 1)
        assert df["Departamento"].tolist() == ["Salto", "Florida", "Rocha"]
        assert df.attrs["diagnostics"]["missing_dates"] == 2

    def test_unbalanced_quote_keeps_later_columns(self):
        df = parse_events('Localidad,Departamento,' + COL_VERIFIED + '\n"Paso, del,Salto,si\n')
        assert len(df) == 1
        assert df["Localidad"].iloc[0] == "Paso"
        assert df["Departamento"].iloc[0] == "del"
        assert df[COL_VERIFIED].iloc[0] == "SALTO"

    def test_extra_values_are_ignored(self):
        df = normalize_rows(["a", "b"], [["1", "2", "3"]])
        assert df[["a", "b"]].iloc[0].tolist() == ["1", "2"]

    def test_diagnostics(self, events):
        diagnostics = events.attrs["diagnostics"]
        assert diagnostics["row_count"] == 6
        assert diagnostics["short_rows"] == 1
        assert diagnostics["missing_dates"] == 2
        assert diagnostics["missing_coordinates"] == 2
        assert diagnostics["missing_intensity"] == 2
        assert diagnostics["unclassified"] == 1
