class PromsaintException(Exception):
    pass
