"""
Response Decoder

Turns raw response bodies into typed Pydantic models. The client carries one
decoder instance; it can be replaced to customize how results are parsed.
"""

import logging
from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError

from elastic_ops_exceptions import DecodeError

logger = logging.getLogger(__name__)

M = TypeVar('M', bound=BaseModel)


class JSONDecoder:
    """Decodes JSON response bodies into Pydantic models."""

    def decode(self, data: bytes, model_cls: Type[M]) -> M:
        """
        Validate a JSON body against a model class.

        Args:
            data: Raw response body
            model_cls: Pydantic model to decode into

        Returns:
            Populated model instance

        Raises:
            DecodeError: If the body is not JSON or does not fit the model
        """
        try:
            return model_cls.model_validate_json(data)
        except ValidationError as e:
            logger.warning(f"Failed to decode response into {model_cls.__name__}: {e.error_count()} errors")
            raise DecodeError(f"Failed to decode response into {model_cls.__name__}: {e}") from e
