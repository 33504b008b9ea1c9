"""
Bulk Service - Applies one per-item operation across a list of inputs

Items run sequentially. A failing item is recorded and the loop moves on;
only errors outside the expected per-item failures abort the batch.
"""
from typing import Any, Callable, Dict, Iterable, List
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from atams.exceptions import AppException
from atams.logging import get_logger

logger = get_logger(__name__)


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten pydantic errors to 'field: message; ...'"""
    parts = []
    for error in exc.errors():
        location = ".".join(str(loc) for loc in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


class BulkService:
    def run(
        self,
        db: Session,
        items: Iterable[Any],
        operation: Callable[[Any], Any],
        key_name: str,
        key_of: Callable[[Any], Any],
        label: str = "bulk"
    ) -> Dict[str, Any]:
        """
        Process every item and aggregate the outcome

        Args:
            db: Database session, rolled back after a failed item
            items: Ordered inputs
            operation: Per-item operation returning the success result
            key_name: Name of the identifying key in error entries
            key_of: Extracts the identifying key from an input
            label: Operation name for logging

        Returns:
            dict: {processed, successful, failed, results, errors}
            results and errors each keep input order
        """
        results: List[Any] = []
        errors: List[Dict[str, Any]] = []
        processed = 0

        def record_failure(key: Any, message: str) -> None:
            db.rollback()
            errors.append({key_name: key, "error": message})
            logger.warning(f"{label} item failed", extra={"extra_data": {key_name: key, "error": message}})

        for item in items:
            processed += 1
            key = key_of(item)
            try:
                results.append(operation(item))
            except AppException as e:
                record_failure(key, e.message)
            except ValidationError as e:
                record_failure(key, describe_validation_error(e))
            except IntegrityError:
                record_failure(key, "Duplicate entry or constraint violation")

        logger.info(
            f"{label} finished",
            extra={"extra_data": {
                "processed": processed,
                "successful": len(results),
                "failed": len(errors)
            }}
        )

        return {
            "processed": processed,
            "successful": len(results),
            "failed": len(errors),
            "results": results,
            "errors": errors
        }
