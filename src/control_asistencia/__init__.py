"""Control de Asistencia package.

Feature modules (registros, fichajes, logs) with a thin Flask controller
layer over service/repository layers backed by Supabase.
"""
