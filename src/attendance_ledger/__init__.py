"""Attendance Ledger package.

Durable employee and attendance records kept in handle-addressed segments:
an id allocator over a counter segment, one sorted record store per entity,
thin services on top and a Flask JSON layer in front.
"""
