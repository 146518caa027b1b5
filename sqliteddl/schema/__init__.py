"JSON schemas for the API and the command line input and output."
