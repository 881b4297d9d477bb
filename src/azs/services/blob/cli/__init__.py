from azs.services.blob.cli import account, container

account_app = account.app
container_app = container.app
