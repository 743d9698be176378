"""Usage record descriptors."""

from typing import ClassVar, Optional

from twiclient.descriptors.base import Descriptor, query


class UsageRecords(Descriptor):
    """Usage records; ``sub_resource`` picks the interval (``Daily``, ``Monthly``, ``ThisMonth``, ...)."""

    resource: ClassVar[Optional[str]] = "/Usage/Records"

    sub_resource: str = ""
    category: str = query("Category")
    start_date: str = query("StartDate")
    end_date: str = query("EndDate")
