"""
Celery workers module.

Background processing of indexing jobs.

Dependencies: celery, python-dotenv, vector_bridge.configs
System role: Background task processing
"""

from celery import Celery
from celery.signals import setup_logging
from dotenv import load_dotenv

from vector_bridge.configs import get_settings
from vector_bridge.observability.logger import configure_logging

load_dotenv()

settings = get_settings()
celery_config = settings.celery

celery_app = Celery(
    "vector_bridge",
    broker=celery_config.broker_url,
    backend=celery_config.result_backend_url,
    include=["vector_bridge.workers.tasks.content_ingestion"],
)

celery_app.conf.update(
    task_serializer=celery_config.task_serializer,
    result_serializer=celery_config.result_serializer,
    accept_content=celery_config.accept_content,
    timezone=celery_config.timezone,
    task_default_queue=celery_config.indexing_queue,
    task_always_eager=celery_config.task_always_eager,
    # One job at a time per worker process; the rate limiter is per process
    worker_prefetch_multiplier=1,
)


@setup_logging.connect
def _configure_worker_logging(**kwargs) -> None:
    """Use the application log format instead of Celery's default."""
    configure_logging(settings.log_level)
