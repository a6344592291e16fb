from handlers.silence import HandlerContext, build_silenced, check_args, execute_handler

__all__ = ["HandlerContext", "build_silenced", "check_args", "execute_handler"]
