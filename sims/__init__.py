"""Student records: an in-memory registry, SQLite storage, binary file export and a console menu."""

__version__ = "0.1.0"