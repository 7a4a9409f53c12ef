from __future__ import annotations

import logging

from flask import Flask, flash, jsonify, redirect, request, url_for

from ..core.exceptions import BackendError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/registros/<int:usuario_id>/fichaje", methods=["POST"], endpoint="fichaje")
    def fichaje(usuario_id: int):
        """Form fallback for the row buttons (no JavaScript)."""
        tipo = request.form.get("tipo", "")
        try:
            message = container.fichaje_service.fichar(
                usuario_id=usuario_id,
                nombre=request.form.get("nombre", ""),
                tipo=tipo,
            )
            flash(message, "success")
        except (ValidationError, BackendError) as e:
            flash(str(e), "error")
        except Exception as e:
            logger.exception("Error al fichar")
            flash(container.fichaje_service.failure_message(tipo, e), "error")
        return redirect(url_for("registros"))

    @app.route("/api/fichajes", methods=["POST"], endpoint="api_fichajes")
    def api_fichajes():
        """JSON endpoint used by the list page; the page shows `message` in a popup."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        tipo = data.get("tipo")
        try:
            message = container.fichaje_service.fichar(
                usuario_id=data.get("usuario_id"),
                nombre=str(data.get("nombre") or ""),
                tipo=tipo,
            )
            return jsonify({"success": True, "message": message}), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except BackendError as e:
            return jsonify({"success": False, "message": str(e)}), 502
        except Exception as e:
            logger.exception("Error al fichar")
            return jsonify({"success": False, "message": container.fichaje_service.failure_message(tipo, e)}), 500
