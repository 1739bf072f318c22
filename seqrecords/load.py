import structlog
from pydantic import TypeAdapter, ValidationError

from seqrecords.records import DnaRecord, SequenceRecord

logger = structlog.get_logger("load")

record_adapter = TypeAdapter(SequenceRecord | DnaRecord)


def load_record(json_: str | bytes) -> SequenceRecord | DnaRecord | None:
    """Take JSON data exported from a record and return a validated record.

    The variant is chosen by the fields present in the data. Returns ``None`` and
    logs each validation error if the data does not describe a valid record.
    """
    try:
        record = record_adapter.validate_json(json_)

    except ValidationError as e:
        for error in e.errors():
            logger.warning(
                "ValidationError",
                msg=error["msg"],
                loc=error["loc"],
                type=error["type"],
            )
        return None

    logger.info(
        "Imported record is valid.",
        name=record.name,
        variant=type(record).__name__,
    )

    return record
