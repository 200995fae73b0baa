"""Church-school roster & attendance package.

Organized by feature modules (students, attendance, dashboard, backup, ...)
with a thin Flask controller layer over service/engine layers. All mutations
go through one state container and are serialized by an action queue.
"""
