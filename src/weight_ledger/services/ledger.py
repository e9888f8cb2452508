"""
Ledger service holding the session's weight records.

Records are kept newest first. After every mutation the full sequence
is written to the key-value store as a single JSON snapshot.
"""

import json
import logging

from pydantic import ValidationError as PydanticValidationError

from weight_ledger.domain.weight import UnrecognizedUnitRecord, WeightRecord
from weight_ledger.infrastructure.storage.key_value_store import KeyValueStore
from weight_ledger.services.statistics import LedgerStatistics, compute_statistics
from weight_ledger.utils.exceptions import DuplicateRecordError

logger = logging.getLogger(__name__)

DEFAULT_SNAPSHOT_KEY = "weightRecords"


class Ledger:
    """
    Ordered collection of weight records mirrored to a key-value store.

    The ledger mutates unconditionally; asking the user to confirm a
    delete or clear is up to the caller.
    """

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_SNAPSHOT_KEY) -> None:
        """
        Initialize ledger.

        Args:
            store: Store holding the snapshot.
            key: Key the snapshot is stored under.
        """
        self.store = store
        self.key = key
        self._records: list[WeightRecord] = []

    @property
    def records(self) -> list[WeightRecord]:
        """Current records, newest first."""
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def get(self, record_id: str) -> WeightRecord | None:
        """Return the record with the given id, if any."""
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def load(self) -> list[WeightRecord]:
        """
        Replace the in-memory records with the persisted snapshot.

        Returns:
            Loaded records. Empty if the snapshot is absent or unreadable.
        """
        self._records = self._read_snapshot()
        logger.info(f"Loaded {len(self._records)} records from '{self.key}'")
        return self.records

    def insert(self, record: WeightRecord) -> list[WeightRecord]:
        """
        Add a record at the front of the ledger.

        Args:
            record: Record to add.

        Returns:
            Updated records.

        Raises:
            DuplicateRecordError: If a record with the same id exists.
        """
        if self.get(record.id) is not None:
            raise DuplicateRecordError(f"Record already in ledger: {record.id}")

        self._records = [record, *self._records]
        self._persist()
        logger.info(f"Inserted record {record.id} ('{record.name}')")
        return self.records

    def remove(self, record_id: str) -> list[WeightRecord]:
        """
        Remove the record with the given id. Unknown ids are a no-op.

        Args:
            record_id: Identifier of the record to remove.

        Returns:
            Updated records.
        """
        remaining = [r for r in self._records if r.id != record_id]
        if len(remaining) == len(self._records):
            logger.debug(f"No record with id {record_id} to remove")
        else:
            logger.info(f"Removed record {record_id}")

        self._records = remaining
        self._persist()
        return self.records

    def clear(self) -> list[WeightRecord]:
        """
        Remove every record.

        Returns:
            The empty record list.
        """
        logger.info(f"Clearing {len(self._records)} records")
        self._records = []
        self._persist()
        return self.records

    def statistics(self) -> LedgerStatistics:
        """Statistics over the current records."""
        return compute_statistics(self._records)

    def _persist(self) -> None:
        snapshot = json.dumps([r.to_dict() for r in self._records], ensure_ascii=False)
        self.store.set_item(self.key, snapshot)

    def _read_snapshot(self) -> list[WeightRecord]:
        raw = self.store.get_item(self.key)
        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.warning(f"Corrupt snapshot under '{self.key}', starting empty: {e}")
            return []

        if not isinstance(data, list):
            logger.warning(f"Snapshot under '{self.key}' is not a list, starting empty")
            return []

        records: list[WeightRecord] = []
        seen_ids: set[str] = set()
        for index, item in enumerate(data):
            record = self._parse_entry(index, item)
            if record is None:
                continue

            if record.id in seen_ids:
                logger.warning(f"Skipping duplicate snapshot entry {index}: {record.id}")
                continue

            seen_ids.add(record.id)
            records.append(record)

        return records

    def _parse_entry(self, index: int, item: object) -> WeightRecord | None:
        try:
            return WeightRecord.model_validate(item)
        except PydanticValidationError as e:
            error = e

        # Entries whose only defect is the unit are kept as they were stored
        try:
            record = UnrecognizedUnitRecord.model_validate(item)
        except PydanticValidationError:
            logger.warning(f"Skipping invalid snapshot entry {index}: {error}")
            return None

        logger.warning(f"Snapshot entry {index} has unrecognized unit {record.unit!r}")
        return record
