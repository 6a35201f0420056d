"""
Cross-cutting helpers shared by the adapters.

This module provides:
- The aws_operation decorator for consistent logging around remote calls
"""

import logging
import time
from functools import wraps
from typing import Awaitable, Callable, Optional, TypeVar

from botocore.exceptions import ClientError

from aws_helpers.errors import AwsHelperError

logger = logging.getLogger(__name__)

T = TypeVar('T')


def aws_operation(operation_name: Optional[str] = None):
    """
    Decorator for consistent logging around an AWS adapter coroutine.

    Features:
    - Debug-level entry logging
    - Info-level completion logging with elapsed time
    - Error logging with the AWS error code for ClientError
    - Exceptions are always re-raised unchanged (no retry, no wrapping)

    Usage:
        @aws_operation("dynamodb.put")
        async def put(self, table: str, item: Dict[str, Any]) -> Dict[str, Any]:
            ...
    """
    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            op_name = operation_name or func.__name__
            start_time = time.monotonic()
            logger.debug(f"Starting {op_name}")
            try:
                result = await func(*args, **kwargs)
            except ClientError as e:
                error_code = e.response.get('Error', {}).get('Code', 'Unknown')
                error_msg = e.response.get('Error', {}).get('Message', str(e))
                logger.error(
                    f"AWS error in {op_name}: {error_code} - {error_msg}",
                    exc_info=True,
                    extra={
                        'operation': op_name,
                        'error_code': error_code,
                        'elapsed_ms': _elapsed_ms(start_time),
                    }
                )
                raise
            except AwsHelperError as e:
                logger.warning(
                    f"{type(e).__name__} in {op_name}: {e}",
                    extra={'operation': op_name, 'elapsed_ms': _elapsed_ms(start_time)}
                )
                raise
            except Exception as e:
                logger.error(
                    f"Unexpected error in {op_name}: {str(e)}",
                    exc_info=True,
                    extra={'operation': op_name, 'elapsed_ms': _elapsed_ms(start_time)}
                )
                raise

            elapsed_ms = _elapsed_ms(start_time)
            logger.info(
                f"Successfully completed {op_name} in {elapsed_ms:.2f}ms",
                extra={'operation': op_name, 'elapsed_ms': elapsed_ms}
            )
            return result
        return wrapper
    return decorator


def _elapsed_ms(start_time: float) -> float:
    return (time.monotonic() - start_time) * 1000
