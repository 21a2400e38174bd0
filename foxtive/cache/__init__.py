"""JSON cache front end with in-memory and filesystem drivers."""