from azs.services.tables.cli import tables

tables_app = tables.app
