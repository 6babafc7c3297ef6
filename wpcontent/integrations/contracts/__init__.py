"""
Contracts (data models).

This folder defines the shapes shared by the content client and its collaborators:
- Item / Response values handed back to callers
- the transport contract (get / head) both the real and fixture transports implement
- the log sink contract the client reports outgoing URLs through

Both mock and real HTTP transports should use these contracts.
"""
