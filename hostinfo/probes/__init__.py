from hostinfo.probes import env, files, uname

__all__ = ["env", "files", "uname"]
