import logging

from flask import Blueprint, current_app, g, jsonify, request
from pydantic import ValidationError

from api.auth import login_required
from api.models import DEFAULT_COLUMNS, BoardCreate, UserId
from db import database_settings, open_connection

logger = logging.getLogger(__name__)

bp = Blueprint("boards", __name__, url_prefix="/api")


def create_board_with_columns(conn, data: BoardCreate, owner: UserId):
    """Insert a board and its default columns in one transaction.

    Returns the board row. Nothing is kept if any insert fails.
    """
    try:
        with conn.cursor() as cur:
            cur.execute(
                """
                INSERT INTO boards (name, description, user_id)
                VALUES (%s, %s, %s)
                RETURNING *
                """,
                (data.name, data.description, owner.canonical),
            )
            board = cur.fetchone()

            for name, position in DEFAULT_COLUMNS:
                cur.execute(
                    "INSERT INTO columns (name, position, board_id) VALUES (%s, %s, %s)",
                    (name, position, board["id"]),
                )
        conn.commit()
    except Exception:
        logger.warning("Board creation failed, rolling back")
        conn.rollback()
        raise

    logger.info(f"Created board {board['id']} with {len(DEFAULT_COLUMNS)} columns")
    return board


@bp.post("/boards")
@login_required
def create_board():
    try:
        body = request.get_json(force=True)

        try:
            data = BoardCreate.model_validate(body)
        except ValidationError as e:
            logger.warning(f"Invalid board payload: {e.error_count()} error(s)")
            return (
                jsonify(
                    message="Invalid input data",
                    errors=e.errors(include_url=False),
                ),
                400,
            )

        session_user_id = g.user.id
        request_user_id = data.owner
        logger.info(
            f"Comparing user IDs session={session_user_id} request={request_user_id}"
        )
        if request_user_id != session_user_id:
            logger.warning(f"User {session_user_id} tried to create a board for {request_user_id}")
            return (
                jsonify(message="Unauthorized: Cannot create board for another user"),
                403,
            )

        url, sslmode = database_settings(current_app.config)
        with open_connection(url, sslmode) as conn:
            board = create_board_with_columns(conn, data, request_user_id)

        return jsonify(message="Board created successfully", board=board), 201

    except Exception as e:
        logger.exception("Board creation error")
        return jsonify(message="Something went wrong", error=str(e)), 500
