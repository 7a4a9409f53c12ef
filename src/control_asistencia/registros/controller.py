from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..core.constants import MSG_LISTA_ERROR, MSG_REGISTRO_ERROR
from ..core.enums import View
from ..core.exceptions import BackendError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET", "POST"], endpoint="form")
    def form():
        values = {"nombre": "", "telefono": ""}
        status = None

        if request.method == "POST":
            values = {
                "nombre": request.form.get("nombre", ""),
                "telefono": request.form.get("telefono", ""),
            }
            try:
                message = container.registro_service.register(
                    nombre=values["nombre"],
                    telefono=values["telefono"],
                )
                flash(message, "success")
                # PRG: the redirected GET renders an empty form.
                return redirect(url_for("form"))
            except (ValidationError, BackendError) as e:
                status = {"type": "error", "message": str(e)}
            except Exception:
                logger.exception("Error al guardar")
                status = {"type": "error", "message": MSG_REGISTRO_ERROR}

        return render_template("form.html", values=values, status=status, view=View.FORM.value)

    @app.route("/registros", endpoint="registros")
    def registros():
        rows = []
        list_error = None
        try:
            rows = container.registro_service.list_registros()
        except BackendError as e:
            list_error = str(e)
        except Exception:
            logger.exception("Error al obtener registros")
            list_error = MSG_LISTA_ERROR

        return render_template("list.html", registros=rows, list_error=list_error, view=View.LIST.value)
