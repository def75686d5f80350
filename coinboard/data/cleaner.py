"""Parsing and validation of raw API responses."""
from typing import Any, Dict, List

from coinboard.models import CoinRecord, Sentiment
from coinboard.utils import setup_logger

logger = setup_logger(__name__)


def clean_market_batch(api_response: Any) -> List[CoinRecord]:
    """
    Parse a CoinGecko /coins/markets response into CoinRecords.

    Malformed entries are dropped with a warning instead of failing the
    whole batch. Duplicate ids keep their first occurrence, so ids are
    unique within a batch. Batch order (market cap descending) is kept.

    Args:
        api_response: Decoded JSON body

    Returns:
        List of CoinRecord in API order

    Raises:
        ValueError: response is not a JSON array
    """
    if not isinstance(api_response, list):
        raise ValueError(
            f"Invalid API response: expected a list of coins, got {type(api_response).__name__}"
        )

    records: List[CoinRecord] = []
    seen = set()
    for position, item in enumerate(api_response):
        if not isinstance(item, dict):
            logger.warning(f"Skipping entry #{position}: not an object")
            continue
        try:
            record = CoinRecord.from_api(item)
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            logger.warning(f"Skipping entry #{position} ({item.get('id', '?')}): {e!r}")
            continue

        if record.id in seen:
            logger.warning(f"Skipping duplicate coin id {record.id}")
            continue
        seen.add(record.id)
        records.append(record)

    dropped = len(api_response) - len(records)
    if dropped:
        logger.info(f"Parsed {len(records)} coin(s), dropped {dropped}")
    return records


def parse_sentiment(api_response: Dict) -> Sentiment:
    """
    Parse an alternative.me Fear & Greed response.

    The API returns the index as a string inside ``data[0]``.

    Raises:
        ValueError: response has no usable reading
    """
    try:
        reading = api_response["data"][0]
        value = int(reading["value"])
        classification = str(reading["value_classification"])
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise ValueError(f"Invalid Fear & Greed response: {e!r}") from e

    if not 0 <= value <= 100:
        raise ValueError(f"Fear & Greed value out of range: {value}")
    return Sentiment(value=value, classification=classification)
