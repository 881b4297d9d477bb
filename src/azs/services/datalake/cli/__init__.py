from azs.services.datalake.cli import datalake

datalake_app = datalake.app
