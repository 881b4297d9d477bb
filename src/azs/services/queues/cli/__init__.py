from azs.services.queues.cli import queues

queues_app = queues.app
