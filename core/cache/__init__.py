class _CacheProxy:
    @property
    def drafts(self):
        from .drafts import DraftCacheManager

        return DraftCacheManager


Cache = _CacheProxy()
