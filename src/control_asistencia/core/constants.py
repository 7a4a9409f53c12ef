"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

TABLE_REGISTROS = "registros"
TABLE_FICHAJES = "fichajes"
TABLE_LOGS_REGISTRO = "logs_registro"

LOG_ACCION_NUEVO_REGISTRO = "Registro de nuevo usuario"

# PostgreSQL "undefined_table": the schema was never applied on Supabase.
PG_UNDEFINED_TABLE = "42P01"

MSG_REGISTRO_OK = "¡Contacto registrado correctamente!"
MSG_REGISTRO_ERROR = "Ocurrió un error al guardar los datos."
MSG_TABLAS_FALTANTES = "Error: Falta crear las tablas en Supabase. Ejecuta el script SQL actualizado."
MSG_LISTA_ERROR = "Error desconocido al cargar datos"
MSG_FICHAJE_ERROR = "❌ Error al registrar el fichaje"
