"""
CSV fund catalog loading.

This module loads fund catalog CSV files with validation and error handling.
"""

import asyncio
from pathlib import Path

import pandas as pd
from loguru import logger

from fundfolio.core.exceptions.portfolio import DataError
from fundfolio.core.models.fund import FundData

from .fund_csv_validator import FundCSVValidator


class FundCSVLoader:
    """Loads and validates fund catalog CSV files."""

    async def load(self, file_path: Path) -> list[FundData]:
        """Load fund records from a CSV file.

        Args:
            file_path: Path to the catalog CSV

        Returns:
            Validated fund data in file order

        Raises:
            FileNotFoundError: If the file does not exist
            DataError: If the file cannot be parsed or a row is invalid
        """
        if not file_path.exists():
            raise FileNotFoundError(f"Fund catalog file not found: {file_path}")

        try:
            logger.debug(f"Loading fund catalog: {file_path}")
            df = await self._load_csv_from_disk(file_path)
        except pd.errors.EmptyDataError as e:
            raise DataError(f"Fund CSV file is empty: {file_path.name}") from e
        except pd.errors.ParserError as e:
            logger.error(f"CSV parsing error in {file_path.name}: {str(e)}")
            raise DataError(f"Failed to parse fund CSV file: {file_path.name}") from e
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error ({type(e).__name__}) reading {file_path.name}: {str(e)}")
            raise DataError(f"Failed to read fund CSV file: {file_path.name}") from e

        FundCSVValidator.validate_csv_structure(df, file_path)
        funds = FundCSVValidator.validate_rows(df, file_path)
        logger.info(f"Loaded {len(funds)} funds from {file_path.name}")
        return funds

    async def _load_csv_from_disk(self, file_path: Path) -> pd.DataFrame:
        """Read the CSV in an executor, keeping every value as text."""
        loop = asyncio.get_running_loop()

        def _read_csv() -> pd.DataFrame:
            # Text dtype keeps decimal values exact until they become Decimal
            df = pd.read_csv(file_path, dtype=str, keep_default_na=False)
            df.columns = [str(col).strip() for col in df.columns]
            return df

        return await loop.run_in_executor(None, _read_csv)
