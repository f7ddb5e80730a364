from inkpost.domain.value_objects.auth_payload import AuthPayload
from inkpost.domain.value_objects.blog_draft import BlogDraft
from inkpost.domain.value_objects.verified_identity import VerifiedIdentity

__all__ = ["AuthPayload", "BlogDraft", "VerifiedIdentity"]
