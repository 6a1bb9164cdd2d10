USERS_COLLECTION_NAME = 'users'
TODOS_COLLECTION_NAME = 'todos'
