from flask import Blueprint, current_app

bp = Blueprint("health", __name__)

@bp.get("/health")
def health():
    """
    Liveness check for the proxy host
    Answers without contacting any upstream service; load balancers and the
    browser client use it to check the host and its CORS policy.
    ---
    tags:
      - Health
    responses:
      200:
        description: Proxy host is accepting requests
        schema:
          type: object
          properties:
            status:
              type: string
              example: ok
            version:
              type: string
              description: Value of the API_VERSION setting
              example: 1.0.0
    """
    return {"status": "ok", "version": current_app.config["API_VERSION"]}, 200
