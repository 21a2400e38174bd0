"""Connection-pool configuration and pagination helpers."""