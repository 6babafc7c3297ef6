"""
Integrations layer.
This package contains all code used to communicate with a WordPress installation:
- contracts: Item / Response values and the transport + log sink interfaces
- clients.real_http: the content client and its httpx transport
- clients.mocks: an in-memory fixture transport
- policy: normalization of raw REST records and pagination headers

Key rule:
- Only the transport performs network I/O; the client never calls httpx directly.
"""
