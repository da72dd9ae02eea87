"""Print-press administration package.

Feature modules (employees, tasks, worklogs, finance, payroll, ...) sit behind
a thin Flask controller layer; services hold the use cases and talk to
repositories that are backed either by MySQL or by a local JSON state file.
"""
