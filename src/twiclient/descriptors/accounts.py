"""Account descriptors — /Accounts and /Accounts/{Sid}."""

from twiclient.descriptors.base import Descriptor, PathRole, path, query


class Accounts(Descriptor):
    friendly_name: str = query("FriendlyName")
    status: str = query("Status")


class Account(Descriptor):
    sid: str = path(PathRole.SID)
