"""Upload a report to the mail relay."""

import asyncio
import logging
from typing import Optional

import httpx

from ..models.report import DeliveryRequest, DeliveryResult

logger = logging.getLogger(__name__)


class RelayDispatcher:
    """Posts report uploads to a fixed relay endpoint.

    The relay contract is ``{to, subjectType, info, attachment}`` as
    multipart/form-data. The attachment file is always discarded once the
    attempt ends, whatever the outcome.
    """

    def __init__(
        self,
        relay_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.relay_url = relay_url
        self.timeout = timeout
        self._transport = transport

    async def deliver(self, request: DeliveryRequest) -> DeliveryResult:
        artifact = request.attachment
        try:
            content = await asyncio.to_thread(artifact.read_bytes)
            data = {
                "to": request.recipient,
                "subjectType": request.subject_tag,
                "info": request.body_text,
            }
            files = {"attachment": (artifact.path.name, content, "application/pdf")}

            async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
                response = await client.post(self.relay_url, data=data, files=files)
        except httpx.HTTPError as e:
            logger.warning(f"Relay unreachable at {self.relay_url}: {e}")
            return DeliveryResult(success=False, error_detail=f"Relay request failed: {e}")
        except OSError as e:
            logger.warning(f"Cannot read report {artifact.path}: {e}")
            return DeliveryResult(success=False, error_detail=f"Cannot read report: {e}")
        finally:
            artifact.discard()

        payload = _decode(response)
        if response.is_success:
            logger.info(f"Report for {request.recipient} accepted by relay")
            return DeliveryResult(success=True, relay_response=payload)

        logger.warning(f"Relay rejected report for {request.recipient}: HTTP {response.status_code}")
        return DeliveryResult(
            success=False,
            relay_response=payload,
            error_detail=f"Relay responded with HTTP {response.status_code}",
        )


def _decode(response: httpx.Response):
    try:
        return response.json()
    except ValueError:
        return response.text or None
