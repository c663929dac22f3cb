"""
Data layer: SQLAlchemy models

- core: system-of-record snapshots owned by upstream subsystems (employees,
  assets, licenses, desks). The verification engine only reads them.
- verification: engine-owned cycles and attestation records.
"""
