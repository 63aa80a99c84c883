"""
Fund CSV validation utilities.

This module checks catalog CSV structure and converts validated rows into
``FundData`` records.
"""

from pathlib import Path

import pandas as pd
from loguru import logger

from fundfolio.core.constants import DEFAULT_CURRENCY, DEFAULT_MIN_INVESTMENT
from fundfolio.core.enums import Region
from fundfolio.core.exceptions.portfolio import DataError, ValidationError
from fundfolio.core.models.fund import FundData

REQUIRED_COLUMNS = ["name", "manager", "nav", "year_return", "risk_level", "expense_ratio"]
OPTIONAL_COLUMNS = ["min_investment", "objective", "region", "aum", "currency"]


class FundCSVValidator:
    """Handles validation of fund catalog CSV data."""

    @staticmethod
    def validate_csv_structure(df: pd.DataFrame, file_path: Path) -> None:
        """Validate CSV file has the expected columns and at least one row."""
        if df.empty:
            raise DataError(f"Fund CSV file is empty: {file_path.name}")

        missing_columns = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing_columns:
            raise DataError(
                f"Missing required columns in {file_path.name}: {', '.join(missing_columns)}"
            )

        unknown_columns = [
            col for col in df.columns if col not in REQUIRED_COLUMNS + OPTIONAL_COLUMNS
        ]
        if unknown_columns:
            logger.warning(f"Ignoring unknown columns in {file_path.name}: {unknown_columns}")

        duplicated = df["name"].str.strip().duplicated()
        if duplicated.any():
            names = sorted(set(df.loc[duplicated, "name"]))
            logger.warning(f"Duplicate fund names in {file_path.name}: {names}")

    @staticmethod
    def _optional_text(row: pd.Series, column: str) -> str | None:
        value = row.get(column)
        if value is None or pd.isna(value):
            return None
        text = str(value).strip()
        return text or None

    @staticmethod
    def _parse_min_investment(raw: str | None) -> int:
        if raw is None:
            return DEFAULT_MIN_INVESTMENT
        try:
            return int(raw)
        except ValueError as e:
            raise ValidationError(
                f"min_investment must be an integer, got '{raw}'", field="min_investment"
            ) from e

    @classmethod
    def row_to_fund_data(cls, row: pd.Series) -> FundData:
        """Convert one CSV row into validated fund data.

        Raises:
            ValidationError: If any field is invalid
        """
        return FundData(
            name=cls._optional_text(row, "name") or "",
            manager=cls._optional_text(row, "manager") or "",
            nav=cls._optional_text(row, "nav"),  # type: ignore[arg-type]
            year_return=cls._optional_text(row, "year_return") or "",
            risk_level=cls._optional_text(row, "risk_level") or "",  # type: ignore[arg-type]
            expense_ratio=cls._optional_text(row, "expense_ratio"),  # type: ignore[arg-type]
            min_investment=cls._parse_min_investment(cls._optional_text(row, "min_investment")),
            objective=cls._optional_text(row, "objective"),
            region=cls._optional_text(row, "region") or Region.US,  # type: ignore[arg-type]
            aum=cls._optional_text(row, "aum"),
            currency=cls._optional_text(row, "currency") or DEFAULT_CURRENCY,
        )

    @classmethod
    def validate_rows(cls, df: pd.DataFrame, file_path: Path) -> list[FundData]:
        """Convert every row, reporting the first invalid one.

        Raises:
            DataError: If a row fails validation (line numbers count the header)
        """
        funds = []
        for index, row in df.iterrows():
            line_number = int(index) + 2  # type: ignore[arg-type]
            try:
                funds.append(cls.row_to_fund_data(row))
            except ValidationError as e:
                raise DataError(f"Invalid fund at {file_path.name} line {line_number}: {e}") from e
        return funds
