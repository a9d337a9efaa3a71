import logging

from sluglink.types import LambdaEvent, LambdaContext, LambdaResponse
from sluglink.utils.responses import response_200


logger = logging.getLogger(__name__)


def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle GET /health

    HTTP responses:
        200: Service is up
            status: "healthy"
            storage: name of the storage backend ("redis")
    """
    logger.debug('Health check requested.')
    return response_200({'status': 'healthy', 'storage': 'redis'})
