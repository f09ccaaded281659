"""General helpers: group ids, strings, streams, caches, waiters, ping and HTTP."""