"""Room services: settlement, the room registry, per-recipient views and
the session router.

Nothing in this package touches Flask or Socket.IO; the transport layer
hands in a sender id and delivers the notifications it gets back.
"""
