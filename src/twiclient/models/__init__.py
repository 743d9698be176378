from twiclient.models.response import Resource, ResourceKind, Response, RestException, Status

__all__ = ["Resource", "ResourceKind", "Response", "RestException", "Status"]
