from prlink.core.jobs.base import BaseJob, describe_failure
from prlink.core.jobs.link_ticket import LinkTicketJob

__all__ = [
    'BaseJob',
    'LinkTicketJob',
    'describe_failure',
]
