"""Message elements, faces, sources, message containers and forwards."""