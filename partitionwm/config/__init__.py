"""
partitionwm.config - Configuracion estatica.

    - settings : Settings leidos de partitionwm.yaml al arrancar
    - keymaps  : Tabla de bindings (accion -> chords)
"""
