"""AI enrichment of ticket descriptions and comments, with prompt templates."""