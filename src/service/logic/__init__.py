"""
Business Logic Layer Module.

Pure reshaping of upstream payloads into response records, plus the
per-endpoint failure policy:

- presence: fail loud (404 for unknown users, 500 for upstream failures)
- fivem: fail soft (any failure becomes an offline record)
- twitch: errors propagate; missing credentials give a degraded record
"""
