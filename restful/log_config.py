import json
import logging
import logging.handlers
import queue

# Records from request threads and the app lifespan share one queue
_log_queue: queue.SimpleQueue = queue.SimpleQueue()

queue_handler = logging.handlers.QueueHandler(_log_queue)

# Only the listener thread writes to the console
console_handler = logging.StreamHandler()

listener = logging.handlers.QueueListener(_log_queue, console_handler)
listener.start()

# Registry and renderer events; propagates to the host application
logger = logging.getLogger("restful")
logger.setLevel(logging.DEBUG)
logger.addHandler(queue_handler)


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        return json.dumps(payload)


def configure_logging(json_logging: bool = False) -> None:
    """
    Pick the console format for registry and renderer logs.
    lifespan_manager calls this with RESTConfig.json_logging.
    """
    if json_logging:
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s [%(name)s] %(message)s"
            )
        )
