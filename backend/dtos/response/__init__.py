"""
Response DTOs

What the use-case services hand back to callers. Built from domain objects
with from_domain, so callers never hold a live aggregate.

- UserResponse
- PackingListResponse (with ItemResponse entries and packed/total counts)
"""
