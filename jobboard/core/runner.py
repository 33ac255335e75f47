import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Type

from jobboard.config.settings import settings
from jobboard.core.aggregator import load_job_postings
from jobboard.core.models import JobPosting
from jobboard.gateways.base import JobBoardGateway
from jobboard.gateways.direct import DirectGateway
from jobboard.gateways.proxy import ProxyGateway
from jobboard.portal.extraction.details import DetailOptions
from jobboard.transport.session import SessionManager

logger = logging.getLogger(__name__)

GATEWAYS: Dict[str, Type[JobBoardGateway]] = {
    "proxy": ProxyGateway,
    "direct": DirectGateway,
}


def write_postings(postings: List[JobPosting], output: Optional[Path] = None) -> None:
    """
    Write postings as a JSON array to `output`, or stdout when not given.
    """
    payload = json.dumps([p.to_dict() for p in postings], indent=2, ensure_ascii=False)
    if output is None:
        print(payload)
        return
    output.write_text(payload + "\n", encoding="utf-8")
    logger.info(f"Wrote {len(postings)} postings to {output}")


class Runner:
    """
    Orchestrates a pipeline run: session setup, aggregation and output.
    """

    async def run(
        self, gateway: str = settings.GATEWAY, output: Optional[Path] = None
    ) -> List[JobPosting]:
        """
        Run the pipeline through the named gateway.
        """
        gateway_cls = GATEWAYS.get(gateway.lower())
        if not gateway_cls:
            raise ValueError(
                f"Gateway '{gateway}' not supported. Available gateways: {list(GATEWAYS.keys())}"
            )

        options = DetailOptions(
            normalize_city=settings.NORMALIZE_CITY,
            decode_emails=settings.DECODE_EMAILS,
        )

        try:
            context = await SessionManager.get_context()
            logger.info(f"Starting run via {gateway} gateway")

            postings = await load_job_postings(
                gateway_cls(context),
                options=options,
                batch_size=settings.DETAIL_BATCH_SIZE,
            )
            write_postings(postings, output)
            return postings
        except Exception as e:
            logger.exception(f"Runner failed: {e}")
            raise
        finally:
            await SessionManager.close()


runner = Runner()
